"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path
from typing import List


_DEF_ENV_LOADED = False

_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    # Look for .env in the project root or the package root
    here = Path(__file__).parent
    candidates = [
        here.parent.parent / ".env",  # project root
        here.parent / ".env",
    ]
    for p in candidates:
        if not p.exists():
            continue
        for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):].strip()
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            key = k.strip()
            val = v.strip().strip('"').strip("'")
            if key and os.environ.get(key) is None:
                os.environ[key] = val


# Call once on import
_load_env_file()


def split_candidates(word: str) -> List[str]:
    """Split a comma-separated lookup key into stripped candidates, order kept."""
    return [c.strip() for c in word.strip().split(",")]


def has_candidates(word: str) -> bool:
    """Check if a lookup key still encodes several comma-separated variants."""
    return "," in word


def parse_leading_int(text: str) -> int:
    """Parse the leading integer of a string, 0 if there is none.

    "3" -> 3, " 12abc" -> 12, "abc" -> 0, "" -> 0.
    """
    match = _LEADING_INT_RE.match(text.strip())
    if not match:
        return 0
    return int(match.group(0))


def clamp(n: int, low: int, high: int) -> int:
    """Clamp n into [low, high]."""
    if n < low:
        n = low
    if n > high:
        n = high
    return n
