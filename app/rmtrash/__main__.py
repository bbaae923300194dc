"""Allow running rmtrash as ``python -m rmtrash``."""

from rmtrash.cli.main import app

app(prog_name="rmtrash")
