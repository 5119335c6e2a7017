"""Turn-based monster battle simulator."""

__version__ = "0.1.0"
