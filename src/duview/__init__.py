"""duview - interactive directory size browser."""

__version__ = "0.1.0"
