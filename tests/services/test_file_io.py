"""Tests for snapshot reading and writing."""

import pytest

from services.file_io import read_snapshot, snapshot_from_text, split_lines, write_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\r\nb\rc\n", ["a", "b\rc"]),
        ("\n", [""]),
        ("a\n\n", ["a", ""]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "\n", "a", "a\n", "a\n\nb\n", "a\r\nb\r\n", "x\r\ny", "a\r\nb\nc\r\n", "a\rb\n"],
)
def test_snapshot_reproduces_text(text):
    assert snapshot_from_text(text).to_text() == text


def test_snapshot_fields():
    snapshot = snapshot_from_text("a\r\nb")
    assert snapshot.lines == ("a", "b")
    assert snapshot.endings == ("\r\n", "")
    assert snapshot.newline == "\r\n"


@pytest.mark.asyncio
async def test_crlf_survives_disk_round_trip(tmp_path):
    path = tmp_path / "dos.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    snapshot = await read_snapshot(path)
    await write_text(path, snapshot.to_text())

    assert snapshot.lines == ("one", "two")
    assert path.read_bytes() == b"one\r\ntwo\r\n"


def test_each_line_keeps_its_own_terminator():
    snapshot = snapshot_from_text("a\r\nb\nc\nd\n")

    assert snapshot.endings == ("\r\n", "\n", "\n", "\n")
    assert snapshot.newline == "\n"


@pytest.mark.asyncio
async def test_mixed_endings_survive_disk_round_trip(tmp_path):
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"a\r\nb\nc\rd\n")

    snapshot = await read_snapshot(path)
    await write_text(path, snapshot.to_text())

    assert snapshot.lines == ("a", "b", "c\rd")
    assert path.read_bytes() == b"a\r\nb\nc\rd\n"
