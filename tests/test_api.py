"""Tests for the stable API entry points."""

from __future__ import annotations

import logging

import pytest

from uptight import api
from uptight.anchors import DEFAULT_PROFILE_KEY
from uptight.schemas import ProfileCatalog, SpokeProfile


def test_list_and_get_profile() -> None:
    assert api.list_profiles() == [DEFAULT_PROFILE_KEY]
    out = api.get_profile()
    assert out["key"] == DEFAULT_PROFILE_KEY
    assert out["elbow_gauge"] == "2.34"
    assert out["trunk_gauge"] == "1.8"
    assert out["thread_gauge"] == "2.0"
    assert out["y_offset"] == 649
    assert out["grade"] == pytest.approx(0.848)


def test_unknown_profile_raises_backend_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="uptight.api"):
        with pytest.raises(api.BackendError, match="Unknown spoke profile"):
            api.get_profile("Nope 1x1x1")
    assert "profile lookup failed" in caplog.text


def test_compute_tension() -> None:
    out = api.compute_tension(760)
    assert out["profile"] == DEFAULT_PROFILE_KEY
    assert out["tension"] == pytest.approx(94.128)
    assert out["tension_kgf"] == pytest.approx(94.128)
    assert out["units"] == "kgf"
    assert out["trunk_stress_mpa"] > 0

    out_n = api.compute_tension(760, units="N")
    assert out_n["tension"] == pytest.approx(94.128 * 9.80665)


def test_compute_tension_below_offset_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="uptight.api"):
        with pytest.raises(api.BackendError, match="below the calibration offset"):
            api.compute_tension(100)
    assert "compute_tension failed" in caplog.text


def test_negative_reading_raises_backend_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="uptight.api"):
        with pytest.raises(api.BackendError):
            api.compute_tension(-5)
        with pytest.raises(api.BackendError):
            api.wheel_tension([760, -1])
    assert "compute_tension failed" in caplog.text
    assert "wheel_tension failed" in caplog.text


def test_wheel_tension() -> None:
    out = api.wheel_tension([755, 760, 765])
    assert out["count"] == 3
    assert out["mean"] == pytest.approx(94.128)
    with pytest.raises(api.BackendError):
        api.wheel_tension([760, 500])


def test_reading_for() -> None:
    out = api.reading_for(94.128)
    assert out["reading"] == 760
    out_n = api.reading_for(94.128 * 9.80665, units="N")
    assert out_n["reading"] == 760
    with pytest.raises(api.BackendError):
        api.reading_for(-10.0)
    with pytest.raises(api.BackendError, match="must be finite"):
        api.reading_for(float("inf"))


def test_custom_catalog() -> None:
    p = SpokeProfile(
        model="Test Spoke", dimension="2.0x1.5x2.0",
        elbow_gauge="2.0", trunk_gauge="1.5", y_offset=600, grade=0.5,
    )
    cat = ProfileCatalog(profiles=[p])
    assert api.list_profiles(cat) == ["Test Spoke 2.0x1.5x2.0"]
    out = api.compute_tension(700, "Test Spoke 2.0x1.5x2.0", catalog=cat)
    assert out["tension"] == pytest.approx(50.0)
    with pytest.raises(api.BackendError):
        api.compute_tension(700, catalog=cat)
