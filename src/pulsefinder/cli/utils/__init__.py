"""CLI utility modules."""

from pulsefinder.cli.utils.output import (
    console,
    print_data,
    print_error,
    print_success,
    print_warning,
)
from pulsefinder.cli.utils.runner import configure_logging, run_with_client

__all__ = [
    "console",
    "print_data",
    "print_error",
    "print_success",
    "print_warning",
    "configure_logging",
    "run_with_client",
]
