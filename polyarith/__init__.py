"""Polynomial arithmetic over integer or real coefficients, with a report-writing command."""

__version__ = "0.1.0"
__all__ = ["coefficients", "polynomial", "cli"]