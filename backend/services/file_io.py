"""
File I/O shared by the edit engine and the line reader.

Blocking reads and writes run in a worker thread so the event loop only
suspends at I/O boundaries.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from models.edit import FileSnapshot
from services.errors import FileAccessError, NotAFile


def split_lines_with_endings(text: str) -> list[tuple[str, str]]:
    """Split on "\\n" and "\\r\\n", pairing each line with its terminator.

    A lone "\\r" is line content. A trailing break does not start an extra line.
    """
    pieces = text.split("\n")
    pairs = []
    for piece in pieces[:-1]:
        if piece.endswith("\r"):
            pairs.append((piece[:-1], "\r\n"))
        else:
            pairs.append((piece, "\n"))
    if pieces[-1]:
        pairs.append((pieces[-1], ""))
    return pairs


def split_lines(text: str) -> list[str]:
    return [line for line, _ in split_lines_with_endings(text)]


def snapshot_from_text(text: str) -> FileSnapshot:
    pairs = split_lines_with_endings(text)
    endings = [ending for _, ending in pairs]
    crlf = endings.count("\r\n")
    return FileSnapshot(
        lines=tuple(line for line, _ in pairs),
        endings=tuple(endings),
        newline="\r\n" if crlf > endings.count("\n") else "\n",
    )


def _read_text(path: Path) -> str:
    if not path.is_file():
        if path.exists():
            raise NotAFile(str(path))
        raise FileAccessError(str(path), "read", "file does not exist")
    try:
        # newline="" keeps \r\n intact so the snapshot can reproduce it
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(path), "read", str(e)) from e


def _write_text(path: Path, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(str(path), "write", str(e)) from e


async def read_text(path: Path | str) -> str:
    return await asyncio.to_thread(_read_text, Path(path))


async def read_snapshot(path: Path | str) -> FileSnapshot:
    """Read the file fresh from disk; snapshots are never cached"""
    return snapshot_from_text(await read_text(path))


async def write_text(path: Path | str, content: str) -> None:
    """Overwrite the whole file in one write"""
    await asyncio.to_thread(_write_text, Path(path), content)
