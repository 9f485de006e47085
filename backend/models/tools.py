"""Tool-call data models"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

from .edit import EditOperation


class EditFileLinesArgs(BaseModel):
    """Arguments for edit_file_lines"""

    p: str = Field(description="Path of the file to edit")
    e: list[tuple[PositiveInt, PositiveInt, str]] = Field(
        description="Edits as [startLine, endLine, newContent], 1-indexed and inclusive"
    )
    dryRun: bool = Field(default=False, description="Preview only and return a state ID")

    def operations(self) -> list[EditOperation]:
        return [EditOperation.from_tuple(edit) for edit in self.e]


class ApproveEditArgs(BaseModel):
    """Arguments for approve_edit"""

    stateId: str = Field(description="State ID returned from a dry run edit_file_lines call")


class GetFileLinesArgs(BaseModel):
    """Arguments for get_file_lines"""

    path: str
    lineNumbers: list[PositiveInt]
    context: NonNegativeInt = Field(
        default=0, description="Number of context lines before and after"
    )


class ToolSpec(BaseModel):
    """Tool description as listed to callers"""

    name: str
    description: str
    inputSchema: dict[str, Any]


class ToolListResponse(BaseModel):
    tools: list[ToolSpec]


class ToolCallRequest(BaseModel):
    """Generic tool invocation"""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Every tool call answers with this shape, failures included"""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)
