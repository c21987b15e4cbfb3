"""
surface_plot.py — Daily surface temperature plots on day-of-year and month axes

Given a weekly temperature CSV with columns [day, month, year, depth, temperature]
this module produces two PNGs of the daily surface means with a smoothing curve:
  • <stem>_doy.png   : x-axis labelled with numeric day of year
  • <stem>_month.png : x-axis labelled with month initials, separator lines at month ends

Usage (CLI)
-----------
python surface_plot.py \
  --input /path/weekly_temperature.csv \
  --outdir ./outputs \
  --depth-min 1 --depth-max 5

Dependencies
------------
  pandas, numpy, matplotlib, statsmodels (smoothing curve)
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib

# Use non-interactive backend for headless environments
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
from statsmodels.nonparametric.smoothers_lowess import lowess  # noqa: E402

from month_axis import AxisTick, leap_years_in, month_ticks  # noqa: E402
from surface_prep import SURFACE_DEPTH_MAX, SURFACE_DEPTH_MIN, prepare_daily  # noqa: E402

CM_PER_INCH = 2.54
DOY_LIMITS = (0, 366)


@dataclass(frozen=True)
class PlotTheme:
    """Visual settings handed to every render call."""
    width_cm: float = 16.0
    height_cm: float = 14.0
    dpi: int = 350
    font_size: float = 11.0
    point_color: str = "#4a6fa5"
    point_size: float = 14.0
    point_alpha: float = 0.7
    curve_color: str = "#c0392b"
    curve_width: float = 1.8
    separator_color: str = "0.75"
    separator_style: str = "--"
    separator_width: float = 0.6
    # (rc key, value) pairs; a tuple so the theme stays hashable
    extra_rc: Tuple[Tuple[str, object], ...] = ()

    @property
    def figsize(self) -> Tuple[float, float]:
        return (self.width_cm / CM_PER_INCH, self.height_cm / CM_PER_INCH)

    def rc_params(self) -> Dict[str, object]:
        rc = {
            "font.size": self.font_size,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.grid": False,
            "xtick.minor.visible": False,
            "savefig.dpi": self.dpi,
        }
        rc.update(dict(self.extra_rc))
        return rc


def smooth_curve(
    doy: Sequence[float],
    temperature: Sequence[float],
    frac: float = 0.3,
    min_points: int = 10,
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """LOWESS fit of temperature on day of year, or None if there are too few points."""
    x = np.asarray(doy, dtype=float)
    y = np.asarray(temperature, dtype=float)
    mask = np.isfinite(x) & np.isfinite(y)
    if mask.sum() < min_points:
        return None
    fitted = lowess(y[mask], x[mask], frac=frac, return_sorted=True)
    return fitted[:, 0], fitted[:, 1]


def apply_month_axis(ax, ticks: List[AxisTick], theme: PlotTheme) -> None:
    """Replace DOY tick labels with month initials; separators at visible ticks."""
    ax.set_xticks([t.position for t in ticks])
    ax.set_xticklabels([t.label for t in ticks])
    for tick, spec in zip(ax.xaxis.get_major_ticks(), ticks):
        tick.tick1line.set_visible(spec.tick_visible)
        tick.tick2line.set_visible(False)
    for t in ticks:
        if t.tick_visible:
            ax.axvline(
                t.position,
                color=theme.separator_color,
                linestyle=theme.separator_style,
                linewidth=theme.separator_width,
                zorder=0,
            )
    ax.set_xlabel("Month")


def draw_daily_temperature(
    ax,
    daily: pd.DataFrame,
    theme: PlotTheme,
    month_axis: bool = False,
    title: str | None = None,
):
    """
    Scatter the daily means against day of year with a smoothing curve.
    Expects columns: doy, temperature. Returns the axes drawn on.
    """
    x = pd.to_numeric(daily["doy"], errors="coerce").to_numpy(float)
    y = pd.to_numeric(daily["temperature"], errors="coerce").to_numpy(float)
    mask = np.isfinite(x) & np.isfinite(y)
    if not mask.any():
        print("[WARN] No finite daily temperatures to plot")

    ax.scatter(
        x[mask], y[mask],
        s=theme.point_size, color=theme.point_color, alpha=theme.point_alpha,
        label="Daily mean", zorder=2,
    )
    curve = smooth_curve(x, y)
    if curve is not None:
        ax.plot(curve[0], curve[1], color=theme.curve_color, linewidth=theme.curve_width,
                label="Smoothed", zorder=3)
    else:
        print(f"[INFO] Too few points for a smoothing curve ({int(mask.sum())}); skipping")

    ax.set_xlim(*DOY_LIMITS)
    if month_axis:
        apply_month_axis(ax, month_ticks(), theme)
    else:
        ax.set_xlabel("Day of year")
    ax.set_ylabel("Temperature (°C)")
    if title:
        ax.set_title(title)
    if mask.any():
        ax.legend(loc="best", frameon=False)
    return ax


def plot_daily_temperature(
    daily: pd.DataFrame,
    out_png: str,
    theme: PlotTheme | None = None,
    month_axis: bool = False,
    title: str | None = None,
) -> str:
    """Draw the daily temperature plot in the theme and save it to out_png."""
    theme = theme or PlotTheme()
    with plt.rc_context(theme.rc_params()):
        fig, ax = plt.subplots(figsize=theme.figsize)
        draw_daily_temperature(ax, daily, theme, month_axis=month_axis, title=title)
        fig.tight_layout()
        fig.savefig(out_png, dpi=theme.dpi)
        plt.close(fig)
    return out_png


def render_comparison(
    daily: pd.DataFrame,
    outdir: str,
    theme: PlotTheme | None = None,
    stem: str = "surface_temperature",
) -> Tuple[str, str]:
    """Write the day-of-year and month-axis versions of the same plot."""
    theme = theme or PlotTheme()
    os.makedirs(outdir, exist_ok=True)

    leap = leap_years_in(daily["year"].dropna()) if "year" in daily.columns else []
    if leap:
        print(
            "[INFO] Leap year(s) in data: "
            + ", ".join(str(y) for y in leap)
            + "; month labels use a 365-day year and may sit one day early after February"
        )

    doy_png = plot_daily_temperature(
        daily, os.path.join(outdir, f"{stem}_doy.png"), theme=theme, month_axis=False,
    )
    month_png = plot_daily_temperature(
        daily, os.path.join(outdir, f"{stem}_month.png"), theme=theme, month_axis=True,
    )
    return doy_png, month_png


def main(argv: Sequence[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Plot daily surface temperature on day-of-year and month axes.")
    ap.add_argument("--input", required=True, help="Path to temperature CSV (day,month,year,depth,temperature)")
    ap.add_argument("--outdir", default="./outputs", help="Output directory (default: ./outputs)")
    ap.add_argument("--depth-min", type=float, default=SURFACE_DEPTH_MIN, dest="depth_min",
                    help=f"Shallowest depth in the surface band (default: {SURFACE_DEPTH_MIN:g})")
    ap.add_argument("--depth-max", type=float, default=SURFACE_DEPTH_MAX, dest="depth_max",
                    help=f"Deepest depth in the surface band (default: {SURFACE_DEPTH_MAX:g})")
    ap.add_argument("--stem", default="surface_temperature", help="Output file name prefix")
    ap.add_argument("--dpi", type=int, default=350, help="Image resolution (default: 350)")
    args = ap.parse_args(argv)

    daily = prepare_daily(args.input, depth_min=args.depth_min, depth_max=args.depth_max)
    theme = PlotTheme(dpi=args.dpi)
    doy_png, month_png = render_comparison(daily, args.outdir, theme=theme, stem=args.stem)
    print("Day-of-year plot:", doy_png)
    print("Month plot:", month_png)


if __name__ == "__main__":
    main()
