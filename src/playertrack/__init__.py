"""Live presence tracker for reporting game clients."""

__version__ = "0.1.0"
