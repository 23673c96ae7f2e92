from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional

from config import MAX_GLOB_RESULTS
from pathglob.errors import AccessDeniedError, NotFoundError, ValidationError
from pathglob.glob import eglob, glob
from pathglob.paths import native_path, normalize_posix_path, split_drive_path
from pathglob.walk import walk


"""Local filesystem source built on the path and glob engine.

Provides sandboxed globbing and tree walking under PROJECT_ROOT with
containment checks on both the requested root and every match.
"""

logger = logging.getLogger(__name__)


class LocalSource:
    # Local filesystem access for the MCP tools.

    def __init__(self, *, project_root: Path, max_results: int = MAX_GLOB_RESULTS) -> None:
        self._project_root = project_root.resolve()
        self._max_results = max(1, int(max_results))

    def _resolve_under_root(self, rel_path: str) -> Path:
        raw = (rel_path or "").strip()
        if not raw:
            raise ValidationError("Path is empty")

        p = (self._project_root / raw).resolve()

        # Strong containment check to prevent directory traversal/outside access
        try:
            p.relative_to(self._project_root)
        except ValueError as e:
            raise AccessDeniedError("Access outside project root is not allowed") from e

        return p

    def _check_pattern(self, pattern: str) -> str:
        raw = (pattern or "").strip()
        if not raw:
            raise ValidationError("Pattern is empty")

        universal = raw.replace("\\", "/")
        if universal.startswith(("/", "~")) or split_drive_path(raw)[0]:
            raise AccessDeniedError("Pattern must be relative to the root")
        if normalize_posix_path(universal).split("/")[0] == "..":
            raise AccessDeniedError("Access outside project root is not allowed")

        return native_path(universal)

    def _relative(self, match: str) -> Optional[str]:
        # Matches that resolve outside the project (via ".." or links) are dropped.
        try:
            return Path(match).resolve().relative_to(self._project_root).as_posix()
        except ValueError:
            logger.debug("dropping match outside project root: %r", match)
            return None

    async def list_files(self, *, root: str = ".", pattern: str = "**/*", extended: bool = True) -> List[str]:
        base = self._resolve_under_root(root)
        pat = self._check_pattern(pattern)

        def _do() -> List[str]:
            if not base.exists() or not base.is_dir():
                raise NotFoundError(f"Not a directory: {root}")

            if extended:
                matches = eglob(pat, root_dir=str(base))
            else:
                matches = glob(pat, root_dir=str(base))

            out = sorted({rel for rel in map(self._relative, matches) if rel is not None})
            if len(out) > self._max_results:
                logger.warning("glob %r matched %d paths; truncating to %d", pattern, len(out), self._max_results)
                out = out[: self._max_results]
            return out

        # Offload blocking filesystem IO to a thread to keep async loop responsive
        return await asyncio.to_thread(_do)

    async def walk_tree(self, *, root: str = ".", topdown: bool = True) -> List[Dict[str, object]]:
        base = self._resolve_under_root(root)

        def _do() -> List[Dict[str, object]]:
            if not base.exists() or not base.is_dir():
                raise NotFoundError(f"Not a directory: {root}")

            out: List[Dict[str, object]] = []
            for dirpath, dirnames, filenames in walk(str(base), topdown):
                rel = self._relative(dirpath)
                if rel is None:
                    continue
                out.append({"dirpath": rel, "dirnames": list(dirnames), "filenames": list(filenames)})
            return out

        return await asyncio.to_thread(_do)
