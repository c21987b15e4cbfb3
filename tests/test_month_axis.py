from pathlib import Path
import sys

import pytest

# Ensure repository root on sys.path for direct module imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

import month_axis as ma


def test_month_lengths_cover_common_year():
    assert sum(ma.MONTH_LENGTHS) == 365
    assert len(ma.MONTH_LENGTHS) == 12


def test_month_label_set_shape():
    ls = ma.month_label_set()
    assert len(ls.boundaries) == 11
    assert len(ls.midpoints) == 12
    assert len(ls.labels) == 12
    assert list(ls.labels) == ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"]
    assert ls.boundaries[0] == 31
    assert ls.boundaries[1] == 59
    assert ls.boundaries[10] == 334


def test_midpoints():
    ls = ma.month_label_set()
    assert ls.midpoints[0] == 15.5
    assert ls.midpoints[1] == 45.0
    assert ls.midpoints[11] == 334 + 15.5


def test_boundaries_sit_between_midpoints():
    ls = ma.month_label_set()
    for i in range(11):
        assert ls.midpoints[i] < ls.boundaries[i] < ls.midpoints[i + 1]


def test_month_label_set_is_repeatable():
    assert ma.month_label_set() == ma.month_label_set()


def test_month_label_set_rejects_wrong_length():
    with pytest.raises(ValueError):
        ma.month_label_set((31, 28, 31))


def test_month_ticks_sorted_and_tagged():
    ticks = ma.month_ticks()
    assert len(ticks) == 23
    positions = [t.position for t in ticks]
    assert positions == sorted(positions)
    assert len(set(positions)) == 23
    # alternate: label, boundary, label, ..., label
    assert ticks[0] == ma.AxisTick(15.5, "J", False)
    assert ticks[1] == ma.AxisTick(31.0, "", True)
    assert ticks[-1].label == "D"
    assert all(t.tick_visible == (t.label == "") for t in ticks)


def test_separator_positions():
    seps = ma.separator_positions()
    assert seps[0] == 31.0
    assert seps[-1] == 334.0
    assert len(seps) == 11


def test_leap_years_in():
    assert ma.leap_years_in([2019, 2020, 2020, 2100, 2000]) == [2000, 2020]
    assert ma.leap_years_in([]) == []
