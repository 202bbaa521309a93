"""
Frozen anchor set for spoke calibration profiles with brief origin notes.

Each profile is one row of calibration data: two reference gauges kept as
decimal text, plus the offset/grade pair from the calibration graph fit.
Update this file deliberately when recalibrating, together with the tests.
"""

# Threaded end gauge is not calibrated per profile; consumers assume this.
THREAD_GAUGE_DEFAULT: str = "2.0"  # mm

PROFILES: dict[str, dict[str, str | int | float]] = {
    "DT Alpine III 2.34x1.8x2.0": {
        "model": "DT Alpine III",
        "dimension": "2.34x1.8x2.0",   # triple butted, elbow x trunk x thread
        "elbow_gauge": "2.34",         # mm, shown for reference
        "trunk_gauge": "1.8",          # mm, shown for reference
        "length_mm": 300,              # approx.
        "y_offset": 649,               # calibration graph intercept
        "grade": 0.848,                # 1 / 1.18
    },
}

DEFAULT_PROFILE_KEY: str = "DT Alpine III 2.34x1.8x2.0"

# Origins (free-text for docs)
ORIGINS: dict[str, str] = {
    "y_offset": "Intercept from the calibration graph fitting formula",
    "grade": "Reciprocal of the angle ratio of the fitted x/y graph (1/1.18)",
    "elbow_gauge": "Critical gauge at the bent head, displayed for reference",
    "trunk_gauge": "Critical gauge of the butted middle section, displayed for reference",
    "thread_gauge": "Assumed 2.0 mm for every profile",
}
