"""FeynSight: Feynman diagram rendering backend."""

__version__ = "0.1.0"
