"""hotelsim - in-memory hotel room reservation simulator."""

__version__ = "0.1.0"
