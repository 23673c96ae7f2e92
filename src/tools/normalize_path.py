"""MCP tool exposing path normalization for POSIX and Windows paths."""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from pathglob.models import PathFlavor
from pathglob.paths import normalize_path as _normalize


def register(mcp: FastMCP) -> None:
    @mcp.tool(name="normalize_path")
    def normalize_path(path: str, flavor: Optional[PathFlavor] = None) -> str:
        """Normalize a path string without touching the filesystem.

        Collapses repeated separators, "." segments and "name/.." pairs.
        Params:
          - path: the path to normalize.
          - flavor: "posix" or "windows" (default: the server's platform).
        """
        return _normalize(path, flavor)
