"""Allow ``python -m attoscaffold``."""

from attoscaffold.cli import run

run()
