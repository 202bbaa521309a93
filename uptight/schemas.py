from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Optional, List, Literal, Annotated
from pydantic import BaseModel, Field, ConfigDict, AfterValidator, field_validator, model_validator

from .anchors import DEFAULT_PROFILE_KEY, THREAD_GAUGE_DEFAULT


def _check_gauge_text(v: str) -> str:
    s = v.strip()
    if "_" in s:
        raise ValueError(f"Invalid gauge value: '{v}'")
    try:
        d = Decimal(s)
    except InvalidOperation as e:
        raise ValueError(f"Invalid gauge value: '{v}'") from e
    if not d.is_finite() or d <= 0:
        raise ValueError(f"gauge must be a positive decimal in mm, got '{v}'")
    return s


# Common helpers
# Gauges stay as text ("2.34") so the written digits survive display and files.
GaugeText = Annotated[str, AfterValidator(_check_gauge_text)]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveFinite = Annotated[float, Field(gt=0, allow_inf_nan=False)]
Units = Literal["kgf", "N", "lbf"]

# Grades at or above this are percentage ratios (e.g. 118 for 1.18), not reciprocals.
GRADE_PERCENT_THRESHOLD = 10.0


class SpokeProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    model: str = Field(min_length=1)
    dimension: str = Field(min_length=1)
    elbow_gauge: GaugeText
    trunk_gauge: GaugeText
    thread_gauge: GaugeText = THREAD_GAUGE_DEFAULT
    length_mm: Optional[Annotated[int, Field(gt=0)]] = None
    y_offset: int
    grade: PositiveFinite

    @field_validator("grade")
    @classmethod
    def _grade_is_reciprocal(cls, v: float) -> float:
        if v >= GRADE_PERCENT_THRESHOLD:
            raise ValueError(
                f"grade {v!r} looks like a percentage ratio; use the reciprocal decimal form (e.g. 0.848)"
            )
        return v

    @property
    def key(self) -> str:
        return f"{self.model} {self.dimension}"

    @property
    def elbow_gauge_mm(self) -> Decimal:
        return Decimal(self.elbow_gauge)

    @property
    def trunk_gauge_mm(self) -> Decimal:
        return Decimal(self.trunk_gauge)

    @property
    def thread_gauge_mm(self) -> Decimal:
        return Decimal(self.thread_gauge)


class ProfileCatalog(BaseModel):
    """Ordered set of spoke profiles keyed by "<model> <dimension>"."""
    model_config = ConfigDict(extra="forbid")
    profiles: List[SpokeProfile] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_keys(self) -> "ProfileCatalog":
        seen = set()
        dupes = []
        for p in self.profiles:
            if p.key in seen:
                dupes.append(p.key)
            seen.add(p.key)
        if dupes:
            raise ValueError(f"Duplicate profile keys: {dupes}")
        return self

    def keys(self) -> List[str]:
        return [p.key for p in self.profiles]

    def get(self, key: str) -> SpokeProfile:
        for p in self.profiles:
            if p.key == key:
                return p
        raise KeyError(f"Unknown spoke profile: '{key}'")

    def find(self, model: str, dimension: str) -> SpokeProfile:
        return self.get(f"{model} {dimension}")


class TensionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    reading: NonNegativeInt
    profile: str = DEFAULT_PROFILE_KEY
    units: Units = "kgf"


class WheelReadings(BaseModel):
    model_config = ConfigDict(extra="allow")
    profile: str = DEFAULT_PROFILE_KEY
    units: Units = "kgf"
    readings: Annotated[List[NonNegativeInt], Field(min_length=1)]
