"""Allow running duview with ``python -m duview``."""

from duview.cli import app

app()
