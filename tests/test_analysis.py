"""Tests for wheel tension series and summaries."""

from __future__ import annotations

import pytest

from uptight import analysis as A
from uptight import formulas as F
from uptight.calibration import default_profile


def test_series_tension_uses_profile_fit() -> None:
    p = default_profile()
    assert A.series_tension([649, 760], p) == pytest.approx([0.0, 94.128])
    assert A.series_tension([760], p, "N") == pytest.approx([94.128 * 9.80665])


def test_series_deviation_pct() -> None:
    assert A.series_deviation_pct([90.0, 110.0]) == pytest.approx([-10.0, 10.0])
    assert A.series_deviation_pct([]) == []
    assert A.series_deviation_pct([0.0, 0.0]) == [0.0, 0.0]


def test_wheel_summary() -> None:
    p = default_profile()
    readings = [755, 760, 765, 760]
    out = A.wheel_summary(readings, p)
    tensions = [(r - 649) * 0.848 for r in readings]
    mean = sum(tensions) / 4
    assert out["count"] == 4
    assert out["profile"] == p.key
    assert out["units"] == "kgf"
    assert out["mean"] == pytest.approx(mean)
    assert out["min"] == pytest.approx(min(tensions))
    assert out["max"] == pytest.approx(max(tensions))
    assert out["spread_pct"] == pytest.approx((max(tensions) - min(tensions)) / mean * 100)
    assert out["tensions"] == pytest.approx(tensions)
    assert sum(out["deviation_pct"]) == pytest.approx(0.0, abs=1e-9)
    assert out["trunk_stress_mpa_mean"] == pytest.approx(F.stress_mpa(F.kgf_to_n(mean), "1.8"))


def test_wheel_summary_stress_is_unit_independent() -> None:
    p = default_profile()
    kgf = A.wheel_summary([760, 770], p, "kgf")
    lbf = A.wheel_summary([760, 770], p, "lbf")
    assert lbf["trunk_stress_mpa_mean"] == pytest.approx(kgf["trunk_stress_mpa_mean"])


def test_wheel_summary_rejects_empty_and_slack() -> None:
    p = default_profile()
    with pytest.raises(ValueError):
        A.wheel_summary([], p)
    with pytest.raises(ValueError):
        A.wheel_summary([760, 600], p)
