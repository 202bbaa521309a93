"""
Thin, stable API for tools built on the spoke profile catalog.

Contracts:
  - list_profiles() -> list
  - get_profile(key) -> dict
  - compute_tension(reading, profile, units) -> dict
  - wheel_tension(readings, profile, units) -> dict
  - reading_for(tension, profile, units) -> dict

A profile of None selects the default profile. Units are "kgf", "N" or "lbf".
Validation is performed via Pydantic schemas.
"""
from __future__ import annotations

from typing import Dict, List, Any, Optional
import logging

from . import analysis as A
from . import formulas as F
from .anchors import DEFAULT_PROFILE_KEY
from .calibration import builtin_catalog
from .schemas import ProfileCatalog, SpokeProfile, TensionRequest, WheelReadings, Units


class BackendError(Exception):
    """Raised when backend API computation fails in a controlled way."""
    pass


def _resolve(profile: Optional[str], catalog: Optional[ProfileCatalog]) -> SpokeProfile:
    cat = catalog if catalog is not None else builtin_catalog()
    try:
        return cat.get(profile or DEFAULT_PROFILE_KEY)
    except KeyError as e:
        logging.getLogger(__name__).exception("profile lookup failed")
        raise BackendError(e.args[0]) from e


def list_profiles(catalog: Optional[ProfileCatalog] = None) -> List[str]:
    cat = catalog if catalog is not None else builtin_catalog()
    return cat.keys()


def get_profile(key: Optional[str] = None, catalog: Optional[ProfileCatalog] = None) -> Dict[str, Any]:
    """Profile fields as a plain dict; gauges stay as decimal text."""
    p = _resolve(key, catalog)
    out = p.model_dump()
    out["key"] = p.key
    return out


def compute_tension(
    reading: int,
    profile: Optional[str] = None,
    units: Units = "kgf",
    catalog: Optional[ProfileCatalog] = None,
) -> Dict[str, Any]:
    """Convert one raw meter reading to spoke tension."""
    try:
        req = TensionRequest(reading=reading, profile=profile or DEFAULT_PROFILE_KEY, units=units)
        p = _resolve(req.profile, catalog)
        t_kgf = F.tension_kgf(req.reading, p.y_offset, p.grade)
    except ValueError as e:
        logging.getLogger(__name__).exception("compute_tension failed")
        raise BackendError(str(e)) from e
    return {
        "profile": p.key,
        "reading": req.reading,
        "tension": F.convert_kgf(t_kgf, req.units),
        "units": req.units,
        "tension_kgf": t_kgf,
        "trunk_stress_mpa": F.stress_mpa(F.kgf_to_n(t_kgf), p.trunk_gauge),
    }


def wheel_tension(
    readings: List[int],
    profile: Optional[str] = None,
    units: Units = "kgf",
    catalog: Optional[ProfileCatalog] = None,
) -> Dict[str, Any]:
    """Summarize tension balance across all spokes of a wheel."""
    try:
        req = WheelReadings(readings=readings, profile=profile or DEFAULT_PROFILE_KEY, units=units)
        p = _resolve(req.profile, catalog)
        return A.wheel_summary(req.readings, p, req.units)
    except ValueError as e:
        logging.getLogger(__name__).exception("wheel_tension failed")
        raise BackendError(str(e)) from e


def reading_for(
    tension: float,
    profile: Optional[str] = None,
    units: Units = "kgf",
    catalog: Optional[ProfileCatalog] = None,
) -> Dict[str, Any]:
    """Meter reading to aim for when tensioning to a target value."""
    try:
        p = _resolve(profile, catalog)
        t_kgf = F.to_kgf(tension, units)
        reading = F.reading_for_tension(t_kgf, p.y_offset, p.grade)
    except ValueError as e:
        logging.getLogger(__name__).exception("reading_for failed")
        raise BackendError(str(e)) from e
    return {"profile": p.key, "tension": tension, "units": units, "reading": reading}
