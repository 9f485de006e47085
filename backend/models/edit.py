"""Line-edit data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EditOperation(BaseModel):
    """Replace the inclusive 1-indexed range [start_line, end_line] with new_content.

    Range checks live in the edit engine so that a whole batch is validated in
    one place and in a fixed order.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int
    end_line: int
    new_content: str

    @classmethod
    def from_tuple(cls, edit: tuple[int, int, str] | list) -> "EditOperation":
        """Build from the wire form [startLine, endLine, newContent]"""
        start_line, end_line, new_content = edit
        return cls(start_line=start_line, end_line=end_line, new_content=new_content)


EditBatch = list[EditOperation]


class FileSnapshot(BaseModel):
    """File content as lines, each with its own terminator.

    endings[i] is "\\n" or "\\r\\n"; only the last line may have "" (no
    newline at end of file). newline is the file's dominant terminator,
    given to inserted lines.
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()
    endings: tuple[str, ...] = ()
    newline: str = "\n"

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def to_text(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))


class PendingEdit(BaseModel):
    """A previewed edit batch waiting for approval"""

    model_config = ConfigDict(frozen=True)

    token: str
    path: str
    batch: tuple[EditOperation, ...]
    created_at: float  # store clock reading, seconds


class LineInfo(BaseModel):
    """A requested line and its surrounding context"""

    line_number: int
    content: str
    context_before: list[tuple[int, str]] = Field(default_factory=list)
    context_after: list[tuple[int, str]] = Field(default_factory=list)
