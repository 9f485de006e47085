"""Models module - Pydantic data models"""

from .diff import DiffResult
from .edit import EditBatch, EditOperation, FileSnapshot, LineInfo, PendingEdit
from .tools import (
    ApproveEditArgs,
    EditFileLinesArgs,
    GetFileLinesArgs,
    TextContent,
    ToolCallRequest,
    ToolListResponse,
    ToolResponse,
    ToolSpec,
)

__all__ = [
    # Diff models
    "DiffResult",
    # Edit models
    "EditBatch",
    "EditOperation",
    "FileSnapshot",
    "LineInfo",
    "PendingEdit",
    # Tool models
    "ApproveEditArgs",
    "EditFileLinesArgs",
    "GetFileLinesArgs",
    "TextContent",
    "ToolCallRequest",
    "ToolListResponse",
    "ToolResponse",
    "ToolSpec",
]
