"""MCP tool that walks a directory tree under the project root.

Registers the 'walk_tree' tool returning one record per directory.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from config import PROJECT_ROOT
from sources.local_source import LocalSource


def register(mcp: FastMCP, *, source: Optional[LocalSource] = None) -> None:
    @mcp.tool(name="walk_tree")
    async def walk_tree(root: str = ".", topdown: bool = True) -> List[Dict[str, object]]:
        """Walk a directory tree and describe every directory in it.

        Params:
          - root: directory within the project to start from (default: ".").
          - topdown: list parents before children (default: True).

        Returns:
          List of {"dirpath", "dirnames", "filenames"} records; dirpath is
          relative to the project root. Unreadable directories are skipped.
        """
        src = source or LocalSource(project_root=PROJECT_ROOT)
        return await src.walk_tree(root=root, topdown=topdown)
