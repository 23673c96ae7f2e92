from __future__ import annotations

from typing import Optional


class PathGlobError(Exception):
    """Base error for the path and glob engine."""


class PatternSyntaxError(PathGlobError, ValueError):
    """Raised when a wildcard pattern cannot be compiled."""

    def __init__(self, pattern: str, position: Optional[int] = None, reason: str = "") -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason or "invalid wildcard pattern"
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{self.reason}{where}: {pattern!r}")


class ValidationError(PathGlobError):
    """Raised when user input is invalid."""


class AccessDeniedError(PathGlobError):
    """Raised when an operation tries to access data outside allowed scope."""


class NotFoundError(PathGlobError):
    """Raised when a requested directory is not found."""
