"""Logging utilities for lookup and output progress.

Messages follow the "[component] [status] message" convention, e.g.
"[lookup] [fetch] 猫 (0.4s)" or "[cache] [hit] 猫".
"""

import sys


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_status(enabled: bool, component: str, status: str, message: str) -> None:
    """Print a tagged status line if verbose output is enabled."""
    if not enabled:
        return
    print(f"[{component}] [{status}] {message}")


def log_error(message: str) -> None:
    """Print an error line to stderr. Always shown."""
    print(f"[error] {message}", file=sys.stderr)
