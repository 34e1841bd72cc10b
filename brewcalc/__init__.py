"""Brewing helpers: quantities, miscellaneous ingredient tables, hydrometer correction, settings and sessions."""

__version__ = "0.4.1"