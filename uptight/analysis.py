"""
Series generators for wheel tension checks (backend-only). Returns lists/dicts; no plotting.
Uses formulas and the profile's calibration fields.
"""
from typing import Dict, List, Literal, Any

from . import formulas as F
from .schemas import SpokeProfile


def series_tension(readings: List[int], profile: SpokeProfile, units: Literal["kgf", "N", "lbf"] = "kgf") -> List[float]:
    """Return tension per reading in the requested units."""
    return [F.convert_kgf(F.tension_kgf(r, profile.y_offset, profile.grade), units) for r in readings]


def series_deviation_pct(tensions: List[float]) -> List[float]:
    """Return percent deviation of each tension from the mean."""
    if not tensions:
        return []
    mean = sum(tensions) / len(tensions)
    if mean <= 0:
        return [0.0 for _ in tensions]
    return [(t - mean) / mean * 100.0 for t in tensions]


def wheel_summary(readings: List[int], profile: SpokeProfile, units: Literal["kgf", "N", "lbf"] = "kgf") -> Dict[str, Any]:
    """Return dict of wheel-level tension metrics for one set of spoke readings."""
    if not readings:
        raise ValueError("readings must not be empty")
    tensions = series_tension(readings, profile, units)
    mean = sum(tensions) / len(tensions)
    t_min = min(tensions)
    t_max = max(tensions)
    # Stress is carried by the thinnest (trunk) section
    mean_n = F.kgf_to_n(F.to_kgf(mean, units))
    return dict(
        profile=profile.key,
        units=units,
        count=len(tensions),
        mean=mean,
        min=t_min,
        max=t_max,
        spread_pct=((t_max - t_min) / mean * 100.0) if mean > 0 else 0.0,
        tensions=tensions,
        deviation_pct=series_deviation_pct(tensions),
        trunk_stress_mpa_mean=F.stress_mpa(mean_n, profile.trunk_gauge),
    )
