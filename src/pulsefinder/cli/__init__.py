"""Command-line tools for poking at the PulseFinder API.

Usage:
    pulsefinder --help
    pulsefinder auth check
    pulsefinder player search steam 76561198376543210
    python -m pulsefinder.cli payload repair broken.json
"""

from pulsefinder.cli.main import app

__all__ = ["app"]
