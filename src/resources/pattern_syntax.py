# src/resources/pattern_syntax.py

from mcp.server.fastmcp import FastMCP


WILDCARD_SYNTAX = """\
Wildcard patterns
=================

  *        matches everything (except a leading "." in glob results)
  ?        matches any single character
  [set]    matches any character in set, e.g. [abc] or [a-z]
  [!set]   matches any character not in set ([^set] also works)
  **       (glob_paths with extended=True) zero or more directory levels

A pattern segment that is exactly "**" and comes last matches directories
only. Patterns are matched against whole names. An unterminated "[" is an
error, not an empty match.
"""


def register_resources(mcp: FastMCP) -> None:
    """
    Register pattern syntax resources for the MCP server.
    """

    @mcp.resource(
        "pathglob://syntax/wildcards",
        mime_type="text/plain",
        description="Wildcard and extended glob pattern syntax"
    )
    def wildcard_syntax() -> str:
        return WILDCARD_SYNTAX
