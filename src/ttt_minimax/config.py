"""Runtime settings, read from the environment.

Variables:
- TTT_LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR or CRITICAL.
- TTT_STOP_AT_LINE: 1/true/yes/on ends a searched game at the first line.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "[%(levelname)s] %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    stop_at_line: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    level = env.get("TTT_LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    stop = env.get("TTT_STOP_AT_LINE", "").strip().lower() in _TRUTHY
    return Settings(log_level=level, stop_at_line=stop)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
