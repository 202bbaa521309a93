"""
Centralized calibration constants for the default spoke profile.

Values are sourced from anchors.PROFILES and never change at runtime. Update
anchors.py deliberately when recalibrating and adjust tests accordingly.
"""
from .anchors import PROFILES, DEFAULT_PROFILE_KEY, THREAD_GAUGE_DEFAULT
from .schemas import SpokeProfile, ProfileCatalog

_DEFAULT = PROFILES[DEFAULT_PROFILE_KEY]

# --- Reference gauges (decimal text, mm) ---
# Two of the spoke's critical gauges are displayed for reference.
ELBOW: str = str(_DEFAULT["elbow_gauge"])
TRUNK: str = str(_DEFAULT["trunk_gauge"])
# Threaded end is assumed to be 2.0 mm.
THREAD: str = THREAD_GAUGE_DEFAULT

# --- Calibration graph fit ---
# tension[kgf] = (reading - Y_OFFSET) * GRADE
Y_OFFSET: int = int(_DEFAULT["y_offset"])
GRADE: float = float(_DEFAULT["grade"])  # reciprocal of the fitted slope (1/1.18)

# --- Unit conversions ---
KGF_TO_N: float = 9.80665
LBF_TO_N: float = 4.4482216152605


def default_profile() -> SpokeProfile:
    """Validated profile for DEFAULT_PROFILE_KEY."""
    return SpokeProfile.model_validate(PROFILES[DEFAULT_PROFILE_KEY])


def builtin_catalog() -> ProfileCatalog:
    return ProfileCatalog(profiles=[SpokeProfile.model_validate(v) for v in PROFILES.values()])
