from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from config import PATH_FLAVOR
from pathglob.errors import ValidationError
from pathglob.models import FLAVORS, PathFlavor, separator_for

"""
Path string utilities shared by the glob engine, the walker and the tools.

Splits, joins and normalizes path strings for POSIX and Windows
conventions. Everything here is pure string manipulation; nothing touches
the filesystem.
"""


_DRIVE_RE = re.compile(r"^([A-Za-z]?:)?(.*)$", re.DOTALL)


def resolve_flavor(flavor: Optional[str] = None) -> PathFlavor:
    """Return the requested flavor, or the configured one when omitted."""
    if flavor is None:
        return PATH_FLAVOR
    if flavor not in FLAVORS:
        raise ValidationError(f"Unknown path flavor: {flavor!r}")
    return flavor  # type: ignore[return-value]


def default_separator(flavor: Optional[str] = None) -> str:
    return separator_for(resolve_flavor(flavor))


def split_drive_path(path: str) -> Tuple[str, str]:
    """Split a Windows path into (drive, rest); either part may be empty.

    A lone ":" is not a drive, and no check is made that the drive exists.
    """
    m = _DRIVE_RE.match(path or "")
    if m is None:
        return "", path or ""
    drive, rest = m.group(1) or "", m.group(2)
    if drive == ":":
        return "", rest
    return drive, rest


def split_path(path: str, sep: Optional[str] = None) -> List[str]:
    """Split a path into its components.

    Splits on the separator character itself, never a regular expression.
    If the path is absolute, the first piece keeps the leading separator
    (and drive, for Windows paths), so joining the pieces back together
    with the same separator reproduces the input.

        ""             -> [""]
        "/"            -> ["/"]
        "/foo/bar/baz" -> ["/foo", "bar", "baz"]
        "../foo"       -> ["..", "foo"]
        "d:\\"         -> ["d:\\"]
    """
    sep = sep or default_separator()
    s = path or ""
    drive, rest = split_drive_path(s) if sep == "\\" else ("", s)

    pieces = rest.split(sep)
    if len(pieces) > 1 and pieces[0] == "":
        return [drive + sep + pieces[1]] + pieces[2:]

    pieces[0] = drive + pieces[0]
    return pieces


def join_path(sep: str, *pieces: Union[str, Iterable[str]]) -> str:
    """Join path pieces with sep. Separators are neither added nor removed.

    Accepts the pieces either as separate arguments or as one iterable.
    """
    if len(pieces) == 1 and not isinstance(pieces[0], str):
        return sep.join(pieces[0])
    return sep.join(pieces)  # type: ignore[arg-type]


def _root_and_names(path: str, sep: str) -> Tuple[str, List[str]]:
    # Root is the drive plus one separator when rooted; names skip empty pieces.
    drive, rest = split_drive_path(path) if sep == "\\" else ("", path)
    root = drive + sep if rest.startswith(sep) else drive
    return root, [p for p in rest.split(sep) if p]


def basename(path: str, sep: Optional[str] = None) -> str:
    """Return the final component of a path ("/" for a bare root)."""
    sep = sep or default_separator()
    root, names = _root_and_names(path or "", sep)
    if names:
        return names[-1]
    return root


def dirname(path: str, sep: Optional[str] = None) -> str:
    """Return everything but the final component of a path.

    A single relative component has dirname "."; a single rooted
    component has the root as its dirname.
    """
    sep = sep or default_separator()
    root, names = _root_and_names(path or "", sep)
    if not names:
        return root
    if len(names) == 1:
        return root or "."
    return root + sep.join(names[:-1])


def dirname_basename(path: str, sep: Optional[str] = None) -> Tuple[str, str]:
    """Split a path into a (dirname, basename) pair."""
    sep = sep or default_separator()
    if not path:
        return "", ""

    root, names = _root_and_names(path, sep)
    if not names:
        return root, ""
    if not root and len(names) == 1 and names[0] in (".", ".."):
        return names[0], ""
    return dirname(path, sep), names[-1]


def dirname_basename_extension(path: str, sep: Optional[str] = None) -> Tuple[str, str, str]:
    """Split a path into (dirname, basename, extension).

    The extension is the last ".xxx" suffix of the final component,
    including the dot, or "" when there is none.
    """
    sep = sep or default_separator()
    m = re.match(r"^(.*)(\.[^.%s]+)$" % re.escape(sep), path or "", re.DOTALL)
    if m and not m.group(1).endswith(sep) and m.group(1):
        stem, ext = m.group(1), m.group(2)
    else:
        stem, ext = path or "", ""
    d, b = dirname_basename(stem, sep)
    return d, b, ext


def _collapse(pieces: Iterable[str], *, rooted: bool) -> List[str]:
    # Drop empty and "." pieces, cancel "name/.." pairs, and drop ".." that
    # would climb above the root of a rooted path.
    out: List[str] = []
    for piece in pieces:
        if piece in ("", "."):
            continue
        if piece == "..":
            if out and out[-1] != "..":
                out.pop()
                continue
            if rooted:
                continue
        out.append(piece)
    return out


def normalize_posix_path(path: str) -> str:
    """Normalize a POSIX path, in the manner of posixpath.normpath().

    One leading slash is kept. Two leading slashes are kept when something
    follows them; a bare "//" and three or more slashes collapse to one.
    """
    if path in ("", "."):
        return "."

    body = path.lstrip("/")
    slashes = len(path) - len(body)
    pieces = _collapse(body.split("/"), rooted=slashes > 0)
    rest = "/".join(pieces)

    if slashes == 0:
        return rest or "."
    if slashes == 2 and rest:
        return "//" + rest
    return "/" + rest


def normalize_windows_path(path: str) -> str:
    """Normalize a Windows path. Handles drive letters and UNC paths.

    Without a drive, a leading run of backslashes is preserved exactly,
    since "\\\\server\\share" must not turn into "\\server\\share". With a
    drive the prefix becomes exactly one backslash after the drive, so
    "c:foo" normalizes to "c:\\foo".
    """
    drive, rest = split_drive_path(path or "")
    body = rest.lstrip("\\")
    if drive:
        prefix = drive + "\\"
    else:
        prefix = rest[: len(rest) - len(body)]

    pieces = _collapse(body.split("\\"), rooted=prefix.endswith("\\"))
    if not prefix and not pieces:
        return "."
    return prefix + "\\".join(pieces)


def normalize_path(path: str, flavor: Optional[str] = None) -> str:
    """Normalize a path using the rules of the given (or configured) flavor."""
    f = resolve_flavor(flavor)
    if f == "windows":
        return normalize_windows_path(path)
    return normalize_posix_path(path)


def join_and_normalize_path(*pieces: str, flavor: Optional[str] = None) -> str:
    f = resolve_flavor(flavor)
    return normalize_path(join_path(separator_for(f), pieces), f)


def universal_path(path: str, flavor: Optional[str] = None) -> str:
    """Convert a native path to "/"-separated form. POSIX paths are unchanged."""
    if resolve_flavor(flavor) == "windows":
        return path.replace("\\", "/")
    return path


def native_path(path: str, flavor: Optional[str] = None) -> str:
    """Convert a "/"-separated path to native form. POSIX paths are unchanged."""
    if resolve_flavor(flavor) == "windows":
        return path.replace("/", "\\")
    return path


def longest_common_path_prefix(paths: Sequence[str], flavor: Optional[str] = None) -> str:
    """Return the longest prefix shared by all paths, on component boundaries."""
    if len(paths) < 2:
        return paths[0] if paths else ""

    token_lists = [re.split(r"(/+)", universal_path(p, flavor)) for p in paths]
    common: List[str] = []
    for tokens in zip(*token_lists):
        if any(t != tokens[0] for t in tokens[1:]):
            break
        common.append(tokens[0])
    return native_path("".join(common), flavor)
