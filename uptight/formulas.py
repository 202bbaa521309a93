import math
from decimal import Decimal, InvalidOperation
from typing import Literal

from .calibration import KGF_TO_N, LBF_TO_N

# =============================
# Unit helpers
# =============================

def kgf_to_n(f_kgf: float) -> float:
    """kgf → N."""
    return f_kgf * KGF_TO_N

def n_to_kgf(f_n: float) -> float:
    """N → kgf."""
    return f_n / KGF_TO_N

def kgf_to_lbf(f_kgf: float) -> float:
    """kgf → lbf."""
    return f_kgf * KGF_TO_N / LBF_TO_N

def lbf_to_kgf(f_lbf: float) -> float:
    """lbf → kgf."""
    return f_lbf * LBF_TO_N / KGF_TO_N

def convert_kgf(f_kgf: float, units: Literal["kgf", "N", "lbf"]) -> float:
    """Express a kgf value in the requested units."""
    if units == "kgf":
        return f_kgf
    if units == "N":
        return kgf_to_n(f_kgf)
    if units == "lbf":
        return kgf_to_lbf(f_kgf)
    raise ValueError("units must be 'kgf', 'N' or 'lbf'")

def to_kgf(value: float, units: Literal["kgf", "N", "lbf"]) -> float:
    """Inverse of convert_kgf."""
    if units == "kgf":
        return value
    if units == "N":
        return n_to_kgf(value)
    if units == "lbf":
        return lbf_to_kgf(value)
    raise ValueError("units must be 'kgf', 'N' or 'lbf'")

# =============================
# Gauge geometry
# =============================

def gauge_mm(text: str) -> Decimal:
    """
    Exact gauge diameter from its decimal text.
    Args:
        text: gauge as written, e.g. "2.34"
    Returns:
        Decimal: diameter [mm], no binary rounding
    """
    s = str(text).strip()
    if "_" in s:
        raise ValueError(f"Invalid gauge value: '{text}'")
    try:
        d = Decimal(s)
    except InvalidOperation as e:
        raise ValueError(f"Invalid gauge value: '{text}'") from e
    if not d.is_finite() or d <= 0:
        raise ValueError("gauge > 0")
    return d

def cross_section_mm2(gauge: str | Decimal) -> float:
    """
    Round section area [mm²]:
        A = pi * d^2 / 4
    """
    d = float(gauge_mm(str(gauge)))
    return math.pi * d * d / 4.0

def stress_mpa(tension_n: float, gauge: str | Decimal) -> float:
    """
    Axial stress in a section of the given gauge [MPa = N/mm²].
    Args:
        tension_n: spoke tension [N]
        gauge: section diameter [mm] as text or Decimal
    """
    if tension_n < 0:
        raise ValueError("tension_n >= 0")
    return tension_n / cross_section_mm2(gauge)

# =============================
# Calibration fit
# =============================

def tension_kgf(reading: float, y_offset: int, grade: float) -> float:
    """
    Spoke tension from a raw meter reading:
        T = (reading - y_offset) * grade
    Args:
        reading: raw meter reading
        y_offset: calibration intercept of the profile
        grade: reciprocal slope of the profile's calibration fit
    Returns:
        float: tension [kgf]
    """
    if not math.isfinite(grade) or grade <= 0:
        raise ValueError("grade > 0")
    if reading < y_offset:
        raise ValueError(f"reading {reading} is below the calibration offset {y_offset}")
    return (reading - y_offset) * grade

def reading_for_tension(t_kgf: float, y_offset: int, grade: float) -> int:
    """
    Raw meter reading expected at a target tension, rounded to a whole step:
        reading = y_offset + T / grade
    """
    if not math.isfinite(grade) or grade <= 0:
        raise ValueError("grade > 0")
    if not math.isfinite(t_kgf):
        raise ValueError("t_kgf must be finite")
    if t_kgf < 0:
        raise ValueError("t_kgf >= 0")
    return int(round(y_offset + t_kgf / grade))
