"""catalogd - in-memory module and template catalog with a live change feed."""

__version__ = "1.0.0"
