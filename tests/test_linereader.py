import io

import pytest

from pipex.linereader import LineReader

SAMPLES = [
    "first\nsecond\nthird\n",
    "no newline at end",
    "\n\n\n",
    "mixed\n\nblank lines\nlast",
    "",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 7, 1024])
def test_text_round_trip(text, size):
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 3, 64])
def test_bytes_round_trip(text, size):
    data = text.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert len(lines) == len(data.splitlines())


def test_read_line_sequence():
    reader = LineReader(io.StringIO("a\nb"), 1)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_limiter_line_is_whole():
    reader = LineReader(io.StringIO("hello\nEOF\nafter\n"), 4)
    assert list(reader) == ["hello\n", "EOF\n", "after\n"]


def test_reads_new_data_after_eof():
    stream = io.StringIO()
    reader = LineReader(stream, 2)
    assert reader.read_line() is None
    stream.write("late\n")
    stream.seek(0)
    assert reader.read_line() == "late\n"


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_error_propagates():
    class Broken(io.RawIOBase):
        def readable(self):
            return True

        def read(self, n=-1):
            raise OSError("boom")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()