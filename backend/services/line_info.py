"""Line-Context Reader - Look up lines by number with surrounding context"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from models.edit import LineInfo
from services.errors import LineOutOfRange
from services.file_io import read_snapshot


class LineInfoReader:
    """Read requested lines plus up to `context` lines on each side"""

    async def read(
        self,
        path: Path | str,
        line_numbers: Iterable[int],
        context: int = 0,
    ) -> dict[int, LineInfo]:
        """All-or-nothing: any number past the end fails the whole call"""
        snapshot = await read_snapshot(path)
        lines = snapshot.lines
        requested = sorted(set(line_numbers))

        out_of_range = [n for n in requested if n < 1 or n > len(lines)]
        if out_of_range:
            raise LineOutOfRange(out_of_range, len(lines))

        result = {}
        for number in requested:
            before_start = max(1, number - context)
            after_end = min(len(lines), number + context)
            result[number] = LineInfo(
                line_number=number,
                content=lines[number - 1],
                context_before=[(n, lines[n - 1]) for n in range(before_start, number)],
                context_after=[(n, lines[n - 1]) for n in range(number + 1, after_end + 1)],
            )
        return result


def format_line_info(infos: dict[int, LineInfo]) -> str:
    """Render lines for a tool response; the requested line is marked with '>'"""
    blocks = []
    for number in sorted(infos):
        info = infos[number]
        last = info.context_after[-1][0] if info.context_after else number
        width = len(str(last))
        block = [f"Line {number}:", f"Content: {info.content}"]
        if info.context_before or info.context_after:
            block.append("Context:")
            for n, text in info.context_before:
                block.append(f"  {n:>{width}}: {text}")
            block.append(f"> {number:>{width}}: {info.content}")
            for n, text in info.context_after:
                block.append(f"  {n:>{width}}: {text}")
        blocks.append("\n".join(block))
    return "\n\n".join(blocks)
