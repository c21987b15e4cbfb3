import numpy as np
import pandas as pd

REQUIRED_COLUMNS = ("day", "month", "year", "depth", "temperature")

SURFACE_DEPTH_MIN = 1.0
SURFACE_DEPTH_MAX = 5.0


def load_records(path: str) -> pd.DataFrame:
    """
    Read the weekly temperature table and derive calendar date and day of year.
    Expected columns: day, month, year, depth, temperature.
    Returns one row per input record with added 'date' and 'doy' columns.
    """
    df = pd.read_csv(
        path,
        na_values=["", "NA", "NaN", "-", "--"],
        keep_default_na=True,
    )
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Input CSV missing required column(s): {', '.join(missing)}")

    df = df[list(REQUIRED_COLUMNS)].copy()
    for col in ("day", "month", "year"):
        df[col] = pd.to_numeric(df[col], errors="raise").astype(int)
    df["depth"] = pd.to_numeric(df["depth"], errors="coerce")
    df["temperature"] = pd.to_numeric(df["temperature"], errors="coerce")

    # Bad calendar dates are fatal
    df["date"] = pd.to_datetime(df[["year", "month", "day"]], errors="raise")
    df["doy"] = df["date"].dt.dayofyear.astype(int)
    return df


def select_surface(
    records: pd.DataFrame,
    depth_min: float = SURFACE_DEPTH_MIN,
    depth_max: float = SURFACE_DEPTH_MAX,
) -> pd.DataFrame:
    """Keep surface-band rows; drop non-positive temperatures, keep missing ones."""
    if depth_min > depth_max:
        raise ValueError(f"Invalid depth band: depth_min ({depth_min}) > depth_max ({depth_max}).")
    in_band = records["depth"].between(depth_min, depth_max)
    temp = records["temperature"]
    plausible = temp.isna() | (temp > 0)
    return records[in_band & plausible].copy()


def daily_means(records: pd.DataFrame) -> pd.DataFrame:
    """
    One row per date: mean temperature over the date's records (NaN if all are
    missing), with day/month/year/doy taken from the first record seen.
    """
    if records.empty:
        return pd.DataFrame(columns=["date", "day", "month", "year", "doy", "temperature"])

    daily = (
        records.groupby("date", sort=True)
        .agg(
            day=("day", "first"),
            month=("month", "first"),
            year=("year", "first"),
            doy=("doy", "first"),
            temperature=("temperature", "mean"),
        )
        .reset_index()
    )
    daily["temperature"] = daily["temperature"].astype(float)
    return daily


def prepare_daily(
    path: str,
    depth_min: float = SURFACE_DEPTH_MIN,
    depth_max: float = SURFACE_DEPTH_MAX,
) -> pd.DataFrame:
    records = load_records(path)
    surface = select_surface(records, depth_min=depth_min, depth_max=depth_max)
    daily = daily_means(surface)
    n_missing = int(np.isnan(daily["temperature"].to_numpy(float)).sum()) if len(daily) else 0
    print(f"[INFO] {len(records)} records -> {len(surface)} surface rows -> {len(daily)} dates")
    if n_missing:
        print(f"[WARN] {n_missing} date(s) have no temperature value; mean left undefined")
    return daily
