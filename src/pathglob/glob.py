"""Filename globbing on top of the wildcard matcher and the walker.

glob() expands shell wildcards one directory level at a time, the way
Python's glob.glob() does. eglob() adds a leading "~" for the home
directory and a "**" segment that matches zero or more directory levels
(think Ant).
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from pathglob.models import PathFlavor, separator_for
from pathglob.paths import normalize_path, resolve_flavor, split_drive_path
from pathglob.walk import child_path, walk
from pathglob.wildcard import compile_pattern

logger = logging.getLogger(__name__)

_WILDCARDS = re.compile(r"[*?\[]")


def has_wildcards(s: str) -> bool:
    return _WILDCARDS.search(s) is not None


def _split_pattern(pattern: str, sep: str) -> Tuple[str, str]:
    # (head, tail) split like os.path.split(); trailing separators are
    # dropped from head unless head is nothing but a root.
    drive, rest = split_drive_path(pattern) if sep == "\\" else ("", pattern)
    i = rest.rfind(sep) + 1
    head, tail = rest[:i], rest[i:]
    if head.strip(sep):
        head = head.rstrip(sep)
    return drive + head, tail


def _list_names(directory: str) -> List[str]:
    try:
        return sorted(p.name for p in Path(directory or os.curdir).iterdir())
    except OSError as e:
        logger.debug("cannot list %r: %s", directory, e)
        return []


def _glob1(directory: str, pattern: str, case_sensitive: Optional[bool]) -> List[str]:
    # Compile before listing so a bad pattern fails even on an empty directory.
    matcher = compile_pattern(pattern, case_sensitive)
    names = _list_names(directory)
    if not pattern.startswith("."):
        names = [n for n in names if not n.startswith(".")]
    return [n for n in names if matcher.match(n)]


def _glob0(directory: str, name: str, sep: str) -> List[str]:
    # os.path.isdir/lexists report False instead of raising on EACCES
    if not name:
        return [name] if os.path.isdir(directory) else []
    if os.path.lexists(child_path(directory, name, sep)):
        return [name]
    return []


def _glob(pattern: str, root: str, sep: str, case_sensitive: Optional[bool]) -> List[str]:
    # Results are spelled like pattern; root is only prefixed for listing.
    if not has_wildcards(pattern):
        return [pattern]

    dirname, basename = _split_pattern(pattern, sep)
    if has_wildcards(dirname):
        dirs = _glob(dirname, root, sep, case_sensitive)
    else:
        dirs = [dirname]

    out: List[str] = []
    if has_wildcards(basename):
        # _glob1 compiles too, but only runs when dirs is non-empty
        compile_pattern(basename, case_sensitive)
        for d in dirs:
            names = _glob1(child_path(root, d, sep), basename, case_sensitive)
            out.extend(child_path(d, name, sep) for name in names)
    else:
        for d in dirs:
            names = _glob0(child_path(root, d, sep), basename, sep)
            out.extend(child_path(d, name, sep) for name in names)
    return out


def glob(
    pattern: str,
    *,
    flavor: Optional[str] = None,
    case_sensitive: Optional[bool] = None,
    root_dir: Optional[str] = None,
) -> List[str]:
    """Return the paths matching a shell wildcard pattern.

    A pattern with no wildcards is returned as-is without checking that it
    exists, as Python's glob.glob() does. Names starting with "." only match
    when the pattern's last component starts with ".".

    A relative pattern is matched from root_dir when given, and the results
    are prefixed with it; root_dir itself is never read as a pattern.
    """
    f = resolve_flavor(flavor)
    sep = separator_for(f)

    root = root_dir or ""
    if root and _split_eglob_pattern(pattern, f)[1] != ".":
        root = ""

    return [child_path(root, m, sep) for m in _glob(pattern, root, sep, case_sensitive)]


def _expand_home(pattern: str, sep: str, home: Optional[str]) -> str:
    # Only "~" and "~/..." expand; "~user" is left alone.
    if pattern == "~" or pattern.startswith("~" + sep) or pattern.startswith("~/"):
        base = home if home is not None else str(Path.home())
        return base + sep + pattern[1:].lstrip("/" + sep)
    return pattern


def _split_eglob_pattern(pattern: str, flavor: PathFlavor) -> Tuple[str, str]:
    """Split a pattern into (relative pattern, starting directory)."""
    if flavor == "posix":
        if pattern.startswith("/"):
            return pattern.lstrip("/"), "/"
        return pattern, "."

    drive, rest = split_drive_path(pattern)
    if drive:
        # A drive-relative pattern ("c:foo") is treated as rooted at the drive.
        return rest.lstrip("\\"), drive + "\\"
    if rest.startswith("\\\\"):
        parts = rest.lstrip("\\").split("\\", 2)
        share = "\\\\" + "\\".join(parts[:2])
        return (parts[2] if len(parts) > 2 else ""), share
    if rest.startswith("\\"):
        return rest.lstrip("\\"), "\\"
    return rest, "."


def _expand(
    pieces: Sequence[str],
    directory: str,
    *,
    flavor: PathFlavor,
    case_sensitive: Optional[bool],
) -> Iterator[str]:
    sep = separator_for(flavor)
    head, rest = pieces[0], pieces[1:]

    if head == "**":
        for entry in walk(directory, True, flavor=flavor):
            if rest:
                # Try the rest of the pattern in every directory, this one included.
                yield from _expand(rest, entry.dirpath, flavor=flavor, case_sensitive=case_sensitive)
            else:
                # A trailing "**" matches directories only.
                yield entry.dirpath
        return

    # directory is a real path here, so only head is treated as a pattern
    if has_wildcards(head):
        names = _glob1(directory, head, case_sensitive)
    else:
        names = _glob0(directory, head, sep)
    matches = [child_path(directory, name, sep) for name in names]

    if not rest:
        yield from matches
        return

    for m in matches:
        if os.path.isdir(m):
            yield from _expand(rest, m, flavor=flavor, case_sensitive=case_sensitive)


def eglob(
    pattern: str,
    *,
    flavor: Optional[str] = None,
    case_sensitive: Optional[bool] = None,
    home: Optional[str] = None,
    root_dir: Optional[str] = None,
) -> List[str]:
    """Extended glob: glob() wildcards plus a leading "~" and "**".

    Relative patterns are matched from root_dir when given, otherwise from
    the current directory. Returns normalized paths, or an empty list when
    nothing matches. Raises PatternSyntaxError for a malformed wildcard in
    any segment.
    """
    f = resolve_flavor(flavor)
    sep = separator_for(f)

    adjusted = _expand_home(pattern or ".", sep, home)
    relative, directory = _split_eglob_pattern(adjusted, f)
    if root_dir is not None and directory == ".":
        directory = root_dir
    pieces = [p for p in relative.split(sep) if p] or ["."]

    for piece in pieces:
        if piece != "**" and has_wildcards(piece):
            compile_pattern(piece, case_sensitive)

    matches = _expand(pieces, directory, flavor=f, case_sensitive=case_sensitive)
    return list(dict.fromkeys(normalize_path(m, f) for m in matches))
