"""Directory tree generator, in the spirit of os.walk().

For each directory in the tree rooted at top (including top itself, but
excluding "." and ".."), yields a WalkEntry (dirpath, dirnames, filenames).
The names are bare names; join them onto dirpath to get a full path.

Traversal uses an explicit stack rather than recursion, so deep trees do
not grow the call stack. Each call re-reads the filesystem; nothing is
cached. Symbolic links to directories are followed and cycles are not
detected.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional, Tuple

from pathglob.models import WalkEntry
from pathglob.paths import default_separator

logger = logging.getLogger(__name__)


def child_path(directory: str, name: str, sep: str) -> str:
    # Avoid doubling the separator after a root such as "/" or "c:\"
    if not directory:
        return name
    if directory.endswith(sep) or (sep == "\\" and directory.endswith(":")):
        return directory + name
    return directory + sep + name


def _scan(directory: str) -> Optional[Tuple[List[str], List[str]]]:
    # Partition immediate children into (dirs, non-dirs); None if unlistable.
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("cannot list %r: %s", directory, e)
        return None

    dirs: List[str] = []
    nondirs: List[str] = []
    for child in children:
        # Same as os.walk(): an entry that cannot be stat'ed is not a directory
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        (dirs if is_dir else nondirs).append(child.name)
    return dirs, nondirs


def walk(top: str, topdown: bool = True, *, flavor: Optional[str] = None) -> Iterator[WalkEntry]:
    """Walk the directory tree rooted at top.

    If topdown is True, a directory's entry is yielded before those of its
    subdirectories, and the caller may prune the traversal by removing
    names from entry.dirnames. If False, the entry is yielded after all of
    its subdirectories.

    A directory that cannot be listed contributes nothing; this is not an
    error.
    """
    sep = default_separator(flavor)

    scanned = _scan(top)
    if scanned is None:
        return

    root = WalkEntry(top, *scanned)
    if topdown:
        yield root

    stack: List[Tuple[WalkEntry, Iterator[str]]] = [(root, iter(root.dirnames))]
    while stack:
        entry, pending = stack[-1]
        name = next(pending, None)

        if name is None:
            stack.pop()
            if not topdown:
                yield entry
            continue

        path = child_path(entry.dirpath, name, sep)
        scanned = _scan(path)
        if scanned is None:
            continue

        child = WalkEntry(path, *scanned)
        if topdown:
            yield child
        stack.append((child, iter(child.dirnames)))


def list_recursively(top: str, topdown: bool = True, *, flavor: Optional[str] = None) -> Iterator[str]:
    """Lazily list every file and directory path below top.

    top itself is not included. Top-down, a directory comes before its
    contents; bottom-up, after them.
    """
    sep = default_separator(flavor)
    for dirpath, _, filenames in walk(top, topdown, flavor=flavor):
        if topdown and dirpath != top:
            yield dirpath
        for name in filenames:
            yield child_path(dirpath, name, sep)
        if not topdown and dirpath != top:
            yield dirpath
