"""Console bookkeeping for pharmacies, their medications and their customers."""

__version__ = "0.1.0"
__all__ = ["__version__"]