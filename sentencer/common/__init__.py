"""Common utilities shared across input, lookup and output processing."""

from sentencer.common.utils import (
    split_candidates,
    has_candidates,
    parse_leading_int,
    clamp,
    _load_env_file,
)
from sentencer.common.logging import (
    log_debug,
    log_status,
    log_error,
)
from sentencer.common.console import Console
from sentencer.common.config import RunConfig, load_run_config, build_run_config

__all__ = [
    # utils
    "split_candidates",
    "has_candidates",
    "parse_leading_int",
    "clamp",
    "_load_env_file",
    # logging
    "log_debug",
    "log_status",
    "log_error",
    # console
    "Console",
    # config
    "RunConfig",
    "load_run_config",
    "build_run_config",
]
