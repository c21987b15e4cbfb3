"""
month_axis.py — Day-of-year to month-initial axis mapping

Converts a continuous day-of-year axis into a month axis without touching the
plotted data: unlabeled ticks (and separator lines) at month boundaries,
tick-less single-letter labels at month midpoints.

The mapping always uses a 365-day reference year. In leap years labels after
February sit up to one day early; see ``leap_years_in``.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, List, Sequence, Tuple

MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_INITIALS: Tuple[str, ...] = tuple(calendar.month_name[m][0] for m in range(1, 13))


@dataclass(frozen=True)
class MonthLabelSet:
    boundaries: Tuple[int, ...]
    midpoints: Tuple[float, ...]
    labels: Tuple[str, ...]


@dataclass(frozen=True)
class AxisTick:
    """One x-axis tick: position in DOY, text (may be empty), tick-mark visibility."""
    position: float
    label: str
    tick_visible: bool


def month_label_set(month_lengths: Sequence[int] = MONTH_LENGTHS) -> MonthLabelSet:
    """Month-end boundaries (all but the last), month midpoints and initials."""
    if len(month_lengths) != 12:
        raise ValueError(f"Expected 12 month lengths, got {len(month_lengths)}")
    cumulative = list(accumulate(month_lengths))
    starts = [0] + cumulative[:-1]
    midpoints = tuple(start + length / 2 for start, length in zip(starts, month_lengths))
    return MonthLabelSet(
        boundaries=tuple(cumulative[:-1]),
        midpoints=midpoints,
        labels=MONTH_INITIALS,
    )


def month_ticks(label_set: MonthLabelSet | None = None) -> List[AxisTick]:
    """
    Merge boundary and midpoint positions into one position-sorted tick list.
    Boundaries get a visible tick and no text; midpoints get the month initial
    and no tick mark.
    """
    label_set = label_set or month_label_set()
    ticks = [AxisTick(float(b), "", True) for b in label_set.boundaries]
    ticks += [AxisTick(float(m), lab, False) for m, lab in zip(label_set.midpoints, label_set.labels)]
    return sorted(ticks, key=lambda t: t.position)


def separator_positions(label_set: MonthLabelSet | None = None) -> List[float]:
    label_set = label_set or month_label_set()
    return [float(b) for b in label_set.boundaries]


def leap_years_in(years: Iterable[int]) -> List[int]:
    return sorted({int(y) for y in years if calendar.isleap(int(y))})
