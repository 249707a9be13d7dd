"""Entry point for ``python -m queueboard``."""

from queueboard.cli import cli

if __name__ == "__main__":
    cli()
