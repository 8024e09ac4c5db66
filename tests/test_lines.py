import io

import pytest

from ftkit.lines import LineReader, get_lines


def test_next_line_keeps_newlines():
    reader = LineReader(io.StringIO("a\nb\nc"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "b\n"
    assert reader.next_line() == "c"
    assert reader.next_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 4096])
def test_iteration_reassembles_content(size):
    content = "first line\n\nsecond\nthird without newline"
    lines = list(LineReader(io.StringIO(content), size))
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])


def test_blank_lines_are_returned():
    lines = list(LineReader(io.StringIO("\n\nx\n"), 2))
    assert lines == ["\n", "\n", "x\n"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_get_lines_drops_empty_lines():
    assert get_lines(io.StringIO("a\n\nb\n")) == ["a", "b"]


def test_get_lines_empty():
    assert get_lines(io.StringIO("")) == []


def test_get_lines_large_input():
    content = "\n".join(f"line{i}" for i in range(2000))
    result = get_lines(io.StringIO(content))
    assert result == content.split("\n")