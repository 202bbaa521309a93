"""
Lightweight readers/writers for spoke profile sheets and catalog files.

Profile sheets are a simple labeled text format:

    [PROFILE]
    model: DT Alpine III
    dimension: 2.34x1.8x2.0
    length_mm: 300
    [GAUGES]
    elbow: 2.34
    trunk: 1.8
    [CALIBRATION]
    y_offset: 649
    # length_mm: 298
    grade: 0.848

Lines starting with '#' are ignored. Decimal commas are normalized, and gauge
values are kept as text. Catalogs are JSON written from the pydantic models.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List

from .schemas import SpokeProfile, ProfileCatalog

_SECTIONS = ("PROFILE", "GAUGES", "CALIBRATION")


def _norm_decimal_text(s: str) -> str:
    s_clean = s.strip().replace("\u00A0", "").replace(" ", "").replace(",", ".")
    if "_" in s_clean:
        raise ValueError(f"Invalid numeric value: '{s}'")
    try:
        d = Decimal(s_clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid numeric value: '{s}'") from e
    if not d.is_finite():
        raise ValueError(f"Invalid numeric value: '{s}'")
    return s_clean


def _norm_int(s: str) -> int:
    s_clean = _norm_decimal_text(s)
    d = Decimal(s_clean)
    if d != d.to_integral_value():
        raise ValueError(f"Expected an integer value: '{s}'")
    return int(d)


def _parse_kv(lines: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for ln in lines:
        if ":" not in ln:
            continue
        k, v = ln.split(":", 1)
        out[k.strip().lower()] = v.strip()
    return out


def _require(kv: Dict[str, str], section: str, key: str) -> str:
    if key not in kv or not kv[key]:
        raise ValueError(f"Invalid profile sheet: [{section}] is missing '{key}'")
    return kv[key]


def parse_profile_text(text: str) -> SpokeProfile:
    lines = [ln.strip() for ln in text.splitlines()]
    lines = [ln for ln in lines if ln and not ln.startswith("#")]
    idx = {name: lines.index(f"[{name}]") if f"[{name}]" in lines else -1 for name in _SECTIONS}
    missing = [name for name, i in idx.items() if i == -1]
    if missing:
        raise ValueError(f"Invalid profile sheet: missing sections {missing}")

    # Each block runs to the next section header, in whatever order they appear
    starts = sorted(idx.values())
    blocks: Dict[str, List[str]] = {}
    for name, i in idx.items():
        later = [s for s in starts if s > i]
        end = later[0] if later else len(lines)
        blocks[name] = lines[i + 1 : end]

    kv_profile = _parse_kv(blocks["PROFILE"])
    kv_gauges = _parse_kv(blocks["GAUGES"])
    kv_cal = _parse_kv(blocks["CALIBRATION"])

    data: Dict[str, object] = {
        "model": _require(kv_profile, "PROFILE", "model"),
        "dimension": _require(kv_profile, "PROFILE", "dimension"),
        "elbow_gauge": _norm_decimal_text(_require(kv_gauges, "GAUGES", "elbow")),
        "trunk_gauge": _norm_decimal_text(_require(kv_gauges, "GAUGES", "trunk")),
        "y_offset": _norm_int(_require(kv_cal, "CALIBRATION", "y_offset")),
        "grade": float(_norm_decimal_text(_require(kv_cal, "CALIBRATION", "grade"))),
    }
    if kv_gauges.get("thread"):
        data["thread_gauge"] = _norm_decimal_text(kv_gauges["thread"])
    if kv_profile.get("length_mm"):
        data["length_mm"] = _norm_int(kv_profile["length_mm"])
    return SpokeProfile.model_validate(data)


def dump_profile_text(profile: SpokeProfile) -> str:
    out = [
        "[PROFILE]",
        f"model: {profile.model}",
        f"dimension: {profile.dimension}",
    ]
    if profile.length_mm is not None:
        out.append(f"length_mm: {profile.length_mm}")
    out += [
        "[GAUGES]",
        f"elbow: {profile.elbow_gauge}",
        f"trunk: {profile.trunk_gauge}",
        f"thread: {profile.thread_gauge}",
        "[CALIBRATION]",
        f"y_offset: {profile.y_offset}",
        f"grade: {profile.grade!r}",
    ]
    return "\n".join(out) + "\n"


def load_catalog(path: str | Path) -> ProfileCatalog:
    with open(path, "r", encoding="utf-8") as f:
        return ProfileCatalog.model_validate_json(f.read())


def dump_catalog(catalog: ProfileCatalog, path: str | Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(catalog.model_dump_json(indent=2))
        f.write("\n")
