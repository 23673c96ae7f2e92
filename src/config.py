"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
PROJECT_ROOT, PATH_FLAVOR, FNMATCH_CASE_SENSITIVE, cache sizes and limits).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable

from pathglob.models import FLAVORS, PathFlavor


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_choice(name: str, choices: Iterable[str], default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _host_flavor() -> PathFlavor:
    return "windows" if os.name == "nt" else "posix"


# Path conventions, resolved once at startup
PATH_FLAVOR: PathFlavor = _env_choice("PATH_FLAVOR", FLAVORS, _host_flavor())  # type: ignore[assignment]

# Wildcards match case-sensitively on POSIX hosts only (macOS and Windows fold case)
FNMATCH_CASE_SENSITIVE = _env_bool(
    "FNMATCH_CASE_SENSITIVE",
    _host_flavor() == "posix" and sys.platform != "darwin",
)
FNMATCH_CACHE_SIZE = _env_int("FNMATCH_CACHE_SIZE", 256)

# Project root for LocalSource security boundary
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

# Limits / output
MAX_GLOB_RESULTS = _env_int("MAX_GLOB_RESULTS", 10_000)
LOG_LEVEL = _env_choice("LOG_LEVEL", ("debug", "info", "warning", "error", "critical"), "warning").upper()
