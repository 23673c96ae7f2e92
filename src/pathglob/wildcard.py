"""Shell-style wildcard matching.

Patterns are Unix shell wildcards:

    *        matches everything
    ?        matches any single character
    [set]    matches any character in set
    [!set]   matches any character not in set ("[^set]" also works)

An initial period in the name is not special. Matching is against the
whole name, never a substring. Matches are case-sensitive on POSIX hosts
and case-insensitive elsewhere unless the caller says otherwise.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern

from config import FNMATCH_CACHE_SIZE, FNMATCH_CASE_SENSITIVE
from pathglob.cache import LRUCache
from pathglob.errors import PatternSyntaxError

logger = logging.getLogger(__name__)

_matchers: LRUCache[Pattern[str]] = LRUCache(maxsize=FNMATCH_CACHE_SIZE)

# Characters that mean something inside a regex character class
_CLASS_SPECIALS = re.compile(r"([\\\[&~|])")


def translate(pattern: str) -> str:
    """Translate a wildcard pattern into an anchored regular expression.

    Raises PatternSyntaxError for a "[" with no closing "]".
    """
    out: List[str] = []
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]
        i += 1

        if c == "*":
            # Consecutive stars are one star
            if not out or out[-1] != ".*":
                out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            start = i - 1
            j = i
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            j = pattern.find("]", j)
            if j < 0:
                raise PatternSyntaxError(pattern, start, "unterminated character class")

            body = pattern[i:j]
            i = j + 1
            negate = body[:1] in ("!", "^")
            if negate:
                body = body[1:]
            out.append("[" + ("^" if negate else "") + _CLASS_SPECIALS.sub(r"\\\1", body) + "]")
        else:
            out.append(re.escape(c))

    return r"(?s:%s)\Z" % "".join(out)


def _compile(pattern: str, case_sensitive: bool) -> Pattern[str]:
    regex = translate(pattern)
    logger.debug("compiled wildcard %r -> %r", pattern, regex)
    try:
        return re.compile(regex, 0 if case_sensitive else re.IGNORECASE)
    except re.error as e:
        raise PatternSyntaxError(pattern, None, str(e)) from e


def compile_pattern(pattern: str, case_sensitive: Optional[bool] = None) -> Pattern[str]:
    """Compile a wildcard pattern, reusing a cached matcher when possible."""
    cs = FNMATCH_CASE_SENSITIVE if case_sensitive is None else bool(case_sensitive)
    return _matchers.get_or_create((pattern, cs), lambda: _compile(pattern, cs))


def fnmatch(name: str, pattern: str, case_sensitive: Optional[bool] = None) -> bool:
    """Return True if name matches the wildcard pattern."""
    return compile_pattern(pattern, case_sensitive).match(name) is not None
