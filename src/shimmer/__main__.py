"""Entry point for ``python -m shimmer``."""

from __future__ import annotations

from shimmer.cli import cli

if __name__ == "__main__":
    cli()
