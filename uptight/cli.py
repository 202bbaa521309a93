"""
Minimal CLI for spoke tension lookups (no GUI).

Usage examples:
  python -m uptight.cli tension --reading 760
  python -m uptight.cli wheel --input readings.json --output wheel.csv

Commands:
  - list: keys of all known spoke profiles
  - profile: fields of one profile
  - tension: tension for a single meter reading
  - reading: meter reading to aim for at a target tension
  - wheel: tension balance across a wheel from JSON readings
  - export-catalog: write the profile catalog as JSON
  - import-sheet: validate a profile sheet and print it as JSON
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional
import csv
import os

from . import api
from . import calibration as CAL
from . import io
from .anchors import DEFAULT_PROFILE_KEY
from . import schemas as S


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _catalog(args: argparse.Namespace) -> Optional[S.ProfileCatalog]:
    path = getattr(args, "catalog", None)
    return io.load_catalog(path) if path else None


def _write_output(obj: Any, path: str | None) -> None:
    if not path:
        json.dump(obj, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False)
    elif ext == ".csv":
        # Flatten dict-of-scalars or dict-of-lists
        if isinstance(obj, dict) and all(not isinstance(v, list) for v in obj.values()):
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(list(obj.keys()))
                w.writerow([obj[k] for k in obj.keys()])
        elif isinstance(obj, dict):
            keys = list(obj.keys())
            n = max(len(v) if isinstance(v, list) else 1 for v in obj.values())
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(keys)
                for i in range(n):
                    row = []
                    for k in keys:
                        v = obj[k]
                        if isinstance(v, list):
                            row.append(v[i] if i < len(v) else "")
                        else:
                            row.append(v if i == 0 else "")
                    w.writerow(row)
        else:
            raise SystemExit("CSV output needs a mapping result (use .json)")
    else:
        raise SystemExit(f"Unsupported output extension: {ext} (use .json or .csv)")


def cmd_list(args: argparse.Namespace) -> int:
    _write_output(api.list_profiles(_catalog(args)), args.output)
    return 0


def cmd_profile(args: argparse.Namespace) -> int:
    _write_output(api.get_profile(args.key, _catalog(args)), args.output)
    return 0


def cmd_tension(args: argparse.Namespace) -> int:
    out = api.compute_tension(args.reading, args.key, args.units, _catalog(args))
    _write_output(out, args.output)
    return 0


def cmd_reading(args: argparse.Namespace) -> int:
    out = api.reading_for(args.tension, args.key, args.units, _catalog(args))
    _write_output(out, args.output)
    return 0


def cmd_wheel(args: argparse.Namespace) -> int:
    data = _read_json(args.input)
    # Validate
    req = S.WheelReadings.model_validate(data)
    out = api.wheel_tension(req.readings, req.profile, req.units, _catalog(args))
    _write_output(out, args.output)
    return 0


def cmd_export_catalog(args: argparse.Namespace) -> int:
    catalog = _catalog(args) or CAL.builtin_catalog()
    io.dump_catalog(catalog, args.output)
    return 0


def cmd_import_sheet(args: argparse.Namespace) -> int:
    with open(args.input, "r", encoding="utf-8") as f:
        profile = io.parse_profile_text(f.read())
    _write_output(profile.model_dump(), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="uptight", description="Spoke profile calibration and tension CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    def _common(sp: argparse.ArgumentParser, *, key: bool = True) -> None:
        if key:
            sp.add_argument("--key", required=False, help="Profile key (default: %s)" % DEFAULT_PROFILE_KEY)
        sp.add_argument("--catalog", required=False, help="Path to JSON profile catalog (default: built-in)")
        sp.add_argument("--output", required=False, help="Output file (.json or .csv)")

    p_list = sub.add_parser("list", help="List known spoke profile keys")
    _common(p_list, key=False)
    p_list.set_defaults(func=cmd_list)

    p_prof = sub.add_parser("profile", help="Show the fields of one spoke profile")
    _common(p_prof)
    p_prof.set_defaults(func=cmd_profile)

    p_ten = sub.add_parser("tension", help="Convert a raw meter reading to spoke tension")
    p_ten.add_argument("--reading", type=int, required=True, help="Raw meter reading")
    p_ten.add_argument("--units", choices=["kgf", "N", "lbf"], default="kgf")
    _common(p_ten)
    p_ten.set_defaults(func=cmd_tension)

    p_rd = sub.add_parser("reading", help="Meter reading to aim for at a target tension")
    p_rd.add_argument("--tension", type=float, required=True, help="Target tension")
    p_rd.add_argument("--units", choices=["kgf", "N", "lbf"], default="kgf")
    _common(p_rd)
    p_rd.set_defaults(func=cmd_reading)

    p_wh = sub.add_parser("wheel", help="Summarize wheel tension balance from JSON readings")
    p_wh.add_argument("--input", required=True, help="Path to JSON input file")
    _common(p_wh, key=False)
    p_wh.set_defaults(func=cmd_wheel)

    p_exp = sub.add_parser("export-catalog", help="Write the profile catalog as JSON")
    p_exp.add_argument("--catalog", required=False, help="Path to JSON profile catalog (default: built-in)")
    p_exp.add_argument("--output", required=True, help="Output .json file")
    p_exp.set_defaults(func=cmd_export_catalog)

    p_imp = sub.add_parser("import-sheet", help="Validate a profile sheet and print it as JSON")
    p_imp.add_argument("--input", required=True, help="Path to profile sheet (.txt)")
    p_imp.add_argument("--output", required=False, help="Output file (.json or .csv)")
    p_imp.set_defaults(func=cmd_import_sheet)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (api.BackendError, ValueError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
