"""Diff-related data models"""

from __future__ import annotations

from pydantic import BaseModel


class DiffResult(BaseModel):
    """Complete diff result for a file"""

    file_path: str
    unified_diff: str  # Standard unified diff format
    preview_content: str  # Full file with changes applied
