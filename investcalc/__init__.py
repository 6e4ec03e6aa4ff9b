"""Compound investment projections: nominal and inflation-adjusted."""

__version__ = "0.1.0"
