"""
Path Guard - Restrict file access to the configured allowed directories
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Iterable

from services.errors import AccessDenied, ParentDirectoryMissing

logger = logging.getLogger(__name__)


def expand_home(path: str) -> str:
    if path == "~" or path.startswith("~/"):
        return str(Path.home()) + path[1:]
    return path


def _normalize(path: str | Path) -> str:
    return os.path.normcase(os.path.normpath(str(path)))


class PathGuard:
    """Admit only paths whose location and real target sit under an allowed root"""

    def __init__(self, allowed_directories: Iterable[str | Path]):
        self.allowed_directories: list[str] = []
        for directory in allowed_directories:
            absolute = os.path.abspath(expand_home(str(directory)))
            # Keep both spellings so a root reached through a symlink still matches
            for root in (_normalize(absolute), _normalize(os.path.realpath(absolute))):
                if root not in self.allowed_directories:
                    self.allowed_directories.append(root)

    def is_allowed(self, path: str | Path) -> bool:
        """Component-wise containment: /data-other is not inside /data"""
        candidate = _normalize(path)
        for root in self.allowed_directories:
            try:
                if os.path.commonpath([candidate, root]) == root:
                    return True
            except ValueError:
                # Different drives on Windows
                continue
        return False

    def _validate(self, requested: str) -> Path:
        absolute = os.path.abspath(expand_home(requested))

        if not self.is_allowed(absolute):
            raise AccessDenied(absolute, "path outside allowed directories")

        if os.path.exists(absolute):
            real_path = os.path.realpath(absolute)
            if not self.is_allowed(real_path):
                raise AccessDenied(absolute, "symlink target outside allowed directories")
            return Path(real_path)

        # New file: its parent must exist and resolve inside the roots
        parent = os.path.dirname(absolute)
        if not os.path.isdir(parent):
            raise ParentDirectoryMissing(parent)
        if not self.is_allowed(os.path.realpath(parent)):
            raise AccessDenied(absolute, "parent directory outside allowed directories")
        return Path(absolute)

    async def validate(self, requested: str) -> Path:
        """Return the admitted path (real path when it exists). Raises AccessDenied."""
        try:
            return await asyncio.to_thread(self._validate, requested)
        except AccessDenied as e:
            logger.warning("%s", e.message)
            raise
