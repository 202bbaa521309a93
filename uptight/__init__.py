"""Spoke profile calibration data and tension conversion."""

__version__ = "0.1.0"
