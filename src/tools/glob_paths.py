"""MCP tool that expands a wildcard pattern under the project root.

Registers the 'glob_paths' tool which adapts LocalSource globbing to the
MCP tool interface used by prompts and agents.
"""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from config import PROJECT_ROOT
from pathglob.errors import ValidationError
from sources.local_source import LocalSource


def register(mcp: FastMCP, *, source: Optional[LocalSource] = None) -> None:
    @mcp.tool(name="glob_paths")
    async def glob_paths(
        root: str = ".",
        pattern: str = "**/*",
        extended: bool = True,
    ) -> List[str]:
        """Expand a shell wildcard pattern and return the sorted matches.

        Params:
          - root: directory within the project to match from (default: ".").
          - pattern: wildcard pattern using *, ?, [set], [!set]; with
            extended=True a "**" segment matches any number of directories
            (default: "**/*").
          - extended: use the extended glob with "**" support (default: True).

        Returns:
          Sorted list of matching paths, relative to the project root and
          "/"-separated. An empty list means nothing matched.

        Raises:
          ValidationError for an empty pattern, PatternSyntaxError for a
          malformed pattern (e.g. an unterminated "["), AccessDeniedError
          for patterns leaving the project, NotFoundError if root is not a
          directory.
        """
        if not pattern or not pattern.strip():
            raise ValidationError("Missing pattern")

        src = source or LocalSource(project_root=PROJECT_ROOT)
        return await src.list_files(root=root, pattern=pattern, extended=extended)
