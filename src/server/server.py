"""Server bootstrap for the pathglob MCP service.

Creates the FastMCP instance, wires the local source and tools, registers
resources, and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL, MAX_GLOB_RESULTS, PROJECT_ROOT
from sources.local_source import LocalSource

from tools.glob_paths import register as register_glob_paths
from tools.match_name import register as register_match_name
from tools.normalize_path import register as register_normalize_path
from tools.walk_tree import register as register_walk_tree

from resources.pattern_syntax import register_resources

mcp = FastMCP("pathglob-mcp")


def register_tools() -> None:
    source = LocalSource(project_root=PROJECT_ROOT, max_results=MAX_GLOB_RESULTS)

    register_glob_paths(mcp, source=source)
    register_walk_tree(mcp, source=source)
    register_normalize_path(mcp)
    register_match_name(mcp)


def register_all() -> None:
    register_tools()
    register_resources(mcp)


register_all()


def main() -> None:
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
