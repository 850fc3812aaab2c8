"""Timebox: day and week layout plus agenda views for a personal calendar."""

from __future__ import annotations

__version__ = "0.1.0"


def main() -> None:
    from .cli import main as cli_main

    cli_main()


__all__ = ["__version__", "main"]
