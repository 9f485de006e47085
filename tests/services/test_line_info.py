"""Tests for the line-context reader."""

import pytest

from services.errors import FileAccessError, LineOutOfRange, NotAFile
from services.line_info import LineInfoReader, format_line_info


CONTENT = "alpha\nbeta\ngamma\ndelta\nepsilon\n"


@pytest.mark.asyncio
async def test_reads_lines_without_context(write_file):
    path = write_file(CONTENT)

    infos = await LineInfoReader().read(path, [2, 4])

    assert sorted(infos) == [2, 4]
    assert infos[2].content == "beta"
    assert infos[2].context_before == []
    assert infos[2].context_after == []


@pytest.mark.asyncio
async def test_context_is_clipped_at_file_edges(write_file):
    path = write_file(CONTENT)

    infos = await LineInfoReader().read(path, [1, 5], context=2)

    assert infos[1].context_before == []
    assert infos[1].context_after == [(2, "beta"), (3, "gamma")]
    assert infos[5].context_before == [(3, "gamma"), (4, "delta")]
    assert infos[5].context_after == []


@pytest.mark.asyncio
async def test_duplicate_numbers_collapse(write_file):
    path = write_file(CONTENT)
    infos = await LineInfoReader().read(path, [3, 3, 1])
    assert list(infos) == [1, 3]


@pytest.mark.asyncio
async def test_any_out_of_range_number_fails_whole_call(write_file):
    path = write_file(CONTENT)

    with pytest.raises(LineOutOfRange) as exc:
        await LineInfoReader().read(path, [2, 9, 6])

    assert exc.value.line_numbers == [6, 9]
    assert exc.value.line_count == 5
    assert exc.value.message == "Lines 6, 9 out of range (file has 5 lines)"


@pytest.mark.asyncio
async def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError):
        await LineInfoReader().read(tmp_path / "absent.txt", [1])


@pytest.mark.asyncio
async def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(NotAFile):
        await LineInfoReader().read(tmp_path, [1])


@pytest.mark.asyncio
async def test_format_marks_requested_line(write_file):
    path = write_file(CONTENT)
    infos = await LineInfoReader().read(path, [2], context=1)

    assert format_line_info(infos) == (
        "Line 2:\n"
        "Content: beta\n"
        "Context:\n"
        "  1: alpha\n"
        "> 2: beta\n"
        "  3: gamma"
    )


def test_format_without_context_omits_context_block():
    from models.edit import LineInfo

    text = format_line_info({7: LineInfo(line_number=7, content="x")})
    assert text == "Line 7:\nContent: x"
