"""
Edit Engine - Validate and apply batches of line-range replacements

A batch is validated as a whole before anything is touched, then applied to
an in-memory copy of the file from the highest start line down, so each
replacement only shifts lines that no pending operation refers to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence

from models.edit import EditOperation, FileSnapshot
from services.diff_generator import DiffGenerator
from services.errors import InvalidLineNumber, InvalidRange, LineOutOfRange, OverlappingEdit
from services.file_io import read_snapshot, split_lines, write_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of applying a batch"""

    diff_text: str
    new_content: str
    written: bool


def validate_batch(batch: Sequence[EditOperation]) -> None:
    """Check line numbers, ranges and overlaps. Raises on the first violation."""
    for edit in batch:
        if edit.start_line < 1 or edit.end_line < 1:
            raise InvalidLineNumber(edit.start_line, edit.end_line)

    for edit in batch:
        if edit.start_line > edit.end_line:
            raise InvalidRange(edit.start_line, edit.end_line)

    # Every pair, in submission order: input order is arbitrary so neighbours
    # after sorting are not enough to report the first conflicting pair.
    for first, second in combinations(batch, 2):
        shared_start = max(first.start_line, second.start_line)
        if shared_start <= min(first.end_line, second.end_line):
            raise OverlappingEdit(shared_start)


def check_bounds(batch: Iterable[EditOperation], snapshot: FileSnapshot) -> None:
    """Ranges must lie inside the file, or append directly after its last line"""
    line_count = snapshot.line_count
    for edit in batch:
        if edit.end_line <= line_count:
            continue
        if edit.start_line == edit.end_line == line_count + 1:
            continue
        raise LineOutOfRange([edit.end_line], line_count)


def order_for_application(batch: Iterable[EditOperation]) -> list[EditOperation]:
    """Highest start line first.

    Replacing a range shifts only the lines after it. Working bottom-up means
    no operation still waiting to be applied sits after an applied one, so
    every stored line number stays valid against the current line list.
    """
    return sorted(batch, key=lambda edit: edit.start_line, reverse=True)


def apply_to_snapshot(snapshot: FileSnapshot, batch: Sequence[EditOperation]) -> FileSnapshot:
    """Apply a validated batch and return the resulting snapshot.

    Untouched lines keep their own terminators. Replacement lines reuse the
    terminators of the lines they replace, position by position, and the
    block's last line takes the last replaced line's; surplus lines take the
    file's dominant terminator. Appended text ends with the original
    end-of-file terminator ("" when there was none).
    """
    lines = list(snapshot.lines)
    endings = list(snapshot.endings)
    eof_ending = snapshot.endings[-1] if snapshot.endings else snapshot.newline

    for edit in order_for_application(batch):
        start = edit.start_line - 1
        at_eof = edit.end_line >= len(lines)
        new_lines = split_lines(edit.new_content)
        replaced = endings[start:edit.end_line]
        new_endings = [
            replaced[k] if k < len(replaced) else snapshot.newline for k in range(len(new_lines))
        ]
        if new_lines:
            if replaced:
                new_endings[-1] = replaced[-1]
            elif at_eof:
                new_endings[-1] = eof_ending
        lines[start:edit.end_line] = new_lines
        endings[start:edit.end_line] = new_endings
        if at_eof and not new_lines and endings and not eof_ending:
            endings[-1] = ""

    # A former last line without newline that now has lines after it
    for i in range(len(endings) - 1):
        if not endings[i]:
            endings[i] = snapshot.newline

    return FileSnapshot(lines=tuple(lines), endings=tuple(endings), newline=snapshot.newline)


class EditEngine:
    """Apply line edits to files on disk"""

    def __init__(self, diff_generator: DiffGenerator | None = None):
        self.diff_generator = diff_generator if diff_generator is not None else DiffGenerator()

    async def apply(
        self,
        path: Path | str,
        batch: Sequence[EditOperation],
        dry_run: bool = False,
    ) -> EditResult:
        """Validate, apply and (unless dry_run) write. Always returns the diff."""
        validate_batch(batch)

        snapshot = await read_snapshot(path)
        check_bounds(batch, snapshot)

        original_content = snapshot.to_text()
        new_content = apply_to_snapshot(snapshot, batch).to_text()

        diff_text = self.diff_generator.render(original_content, new_content, str(path))

        if not dry_run:
            await write_text(path, new_content)
            logger.info("Applied %d edit(s) to %s", len(batch), path)
        else:
            logger.debug("Previewed %d edit(s) to %s", len(batch), path)

        return EditResult(
            diff_text=diff_text,
            new_content=new_content,
            written=not dry_run,
        )
