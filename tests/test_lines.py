import io
import os

import pytest

from zedkit.lines import LineReader

TEXT = "2020/12/04 00:00:00 first\nsecond line\n\nlast without newline"


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(TEXT.encode())
    fd = os.open(path, os.O_RDONLY)
    yield fd
    os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 10000])
def test_lines_rebuild_file(tmp_path, size):
    path = tmp_path / "f.txt"
    path.write_bytes(TEXT.encode())
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(size).lines(fd))
    finally:
        os.close(fd)
    assert lines == TEXT.splitlines(keepends=True)
    assert "".join(lines) == TEXT


def test_next_line_sequence_and_end(text_file):
    reader = LineReader()
    assert reader.next_line(text_file) == "2020/12/04 00:00:00 first\n"
    assert reader.next_line(text_file) == "second line\n"
    assert reader.next_line(text_file) == "\n"
    assert reader.next_line(text_file) == "last without newline"
    assert reader.next_line(text_file) is None
    assert reader.next_line(text_file) is None


def test_empty_file_gives_none(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert LineReader(5).next_line(fd) is None
    finally:
        os.close(fd)


def test_interleaved_sources_keep_separate_buffers():
    reader = LineReader(64)
    a = io.BytesIO(b"a1\na2\na3\n")
    b = io.BytesIO(b"b1\nb2\n")
    assert reader.next_line(a) == "a1\n"
    assert reader.next_line(b) == "b1\n"
    assert reader.next_line(a) == "a2\n"
    assert reader.next_line(b) == "b2\n"
    assert reader.next_line(b) is None
    assert reader.next_line(a) == "a3\n"
    assert reader.next_line(a) is None


def test_discard_returns_and_drops_buffered_data():
    reader = LineReader(100)
    source = io.BytesIO(b"a\nb\nc\n")
    assert reader.next_line(source) == "a\n"
    assert reader.discard(source) == "b\nc\n"
    assert reader.discard(source) is None
    assert reader.next_line(source) is None


def test_text_stream_is_accepted():
    reader = LineReader(3)
    source = io.StringIO("héllo\nwörld")
    assert list(reader.lines(source)) == ["héllo\n", "wörld"]


def test_multibyte_split_across_reads():
    reader = LineReader(1)
    data = "ü\nß".encode()
    assert list(reader.lines(io.BytesIO(data))) == ["ü\n", "ß"]


def test_closed_descriptor_raises(tmp_path):
    path = tmp_path / "x"
    path.write_bytes(b"x\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)


@pytest.mark.parametrize("size", [0, -3])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_pipe_source():
    read_end, write_end = os.pipe()
    os.write(write_end, b"one\ntwo\n")
    os.close(write_end)
    try:
        assert list(LineReader(4).lines(read_end)) == ["one\n", "two\n"]
    finally:
        os.close(read_end)