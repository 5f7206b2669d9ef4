"""Allow running zapctl as ``python -m zapctl``."""

from zapctl.cli.main import app

app()
