"""Run configuration for sentence fetching.

Options come from the command line. A JSON config file (--config) may
supply defaults for the same keys:
- pronunciation_offset: column holding the pronunciation (default: 1)
- definition_offset: column holding the definition (default: 2)
- max_sentences: number of example sentences kept per word (default: 5)
- testdata: YAML fixture file used instead of the live lookup
- console: dump to console only (default: false)
- raw: also output raw data before curation (default: false)
- cache_dir: directory for cached live lookups
- verbose: enable verbose logging (default: false)
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class RunConfig:
    """Configuration for one run over an input file."""
    pronunciation_offset: int = 1
    definition_offset: int = 2  # accepted for compatibility, not used in selection
    max_sentences: int = 5
    testdata: Optional[str] = None
    console: bool = False
    raw: bool = False
    cache_dir: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        for name in ("pronunciation_offset", "definition_offset", "max_sentences"):
            value = getattr(self, name)
            # bool is an int subclass, but true/false is never a valid count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("console", "raw", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        for name in ("testdata", "cache_dir"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a path string, got {value!r}")
        if self.max_sentences < 1:
            raise ValueError(f"max_sentences must be at least 1, got {self.max_sentences}")
        if self.pronunciation_offset < 0:
            raise ValueError(f"pronunciation_offset must not be negative, got {self.pronunciation_offset}")
        if self.definition_offset < 0:
            raise ValueError(f"definition_offset must not be negative, got {self.definition_offset}")


CONFIG_KEYS = tuple(f.name for f in fields(RunConfig))


def load_run_config(path: Path) -> Dict[str, Any]:
    """Load config defaults from a JSON file.

    Returns a dict of RunConfig keyword arguments. Unknown keys are rejected
    so that typos don't silently fall back to defaults.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")

    unknown = sorted(k for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return dict(data)


def build_run_config(file_values: Dict[str, Any], cli_values: Dict[str, Any]) -> RunConfig:
    """Merge config-file values with CLI values. CLI values that are None don't override."""
    merged = dict(file_values)
    for key, value in cli_values.items():
        if value is not None:
            merged[key] = value
    return RunConfig(**merged)
