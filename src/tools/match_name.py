"""MCP tool that tests a name against a shell wildcard pattern."""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from pathglob.wildcard import fnmatch


def register(mcp: FastMCP) -> None:
    @mcp.tool(name="match_name")
    def match_name(name: str, pattern: str, case_sensitive: Optional[bool] = None) -> bool:
        """Return True if the whole name matches the wildcard pattern.

        Params:
          - name: a file name (no directory part).
          - pattern: wildcard pattern using *, ?, [set], [!set].
          - case_sensitive: override the platform default.

        Raises:
          PatternSyntaxError for a malformed pattern.
        """
        return fnmatch(name, pattern, case_sensitive)
