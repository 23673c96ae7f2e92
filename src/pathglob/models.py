"""Value types shared by the path engine and the MCP tools.

Includes the PathFlavor variant used for OS dispatch and the WalkEntry
triple produced by the directory walker.
"""

from __future__ import annotations

from typing import List, Literal, NamedTuple


PathFlavor = Literal["posix", "windows"]

FLAVORS = ("posix", "windows")


def separator_for(flavor: PathFlavor) -> str:
    if flavor == "windows":
        return "\\"
    return "/"


class WalkEntry(NamedTuple):
    """One (dirpath, dirnames, filenames) triple of a directory walk."""

    dirpath: str
    dirnames: List[str]
    filenames: List[str]
