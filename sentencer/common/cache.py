"""JSON file cache for sentence lookups."""

import json
import re
from pathlib import Path
from typing import Any, Optional


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Replaces invalid characters with underscores.
    """
    return re.sub(r'[/\\:*?"<>|]', '_', name)


def get_cache_path(cache_dir: Path, key: str) -> Path:
    """Get the cache file path for a key (usually a word)."""
    return cache_dir / f"{sanitize_filename(key)}.json"


def read_cache(cache_dir: Path, key: str) -> Optional[Any]:
    """Read cached data for a key. Returns None if not cached or unreadable."""
    cache_path = get_cache_path(cache_dir, key)
    if not cache_path.exists():
        return None
    try:
        return json.loads(cache_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None


def write_cache(cache_dir: Path, key: str, data: Any) -> Path:
    """Write data to cache, returning the cache file path."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    cache_path = get_cache_path(cache_dir, key)
    cache_path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return cache_path


__all__ = [
    "sanitize_filename",
    "get_cache_path",
    "read_cache",
    "write_cache",
]
