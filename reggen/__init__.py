"""reggen — compile per-package entry files into a registry index."""

__version__ = "0.1.0"
