"""Entry point for running the CLI as a module.

Usage:
    python -m pulsefinder.cli --help
"""

from pulsefinder.cli.main import app

if __name__ == "__main__":
    app()
