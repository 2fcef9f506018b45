import os

import pytest

from ftkit.output import (
    putchar,
    putchar_fd,
    putendl,
    putendl_fd,
    putnbr,
    putnbr_fd,
    putstr,
    putstr_fd,
)


class _Pipe:
    """An OS pipe whose written bytes can be read back once."""

    def __init__(self):
        self._read_end, self.write_end = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        with os.fdopen(self._read_end, "rb") as reader:
            self._read_open = False
            return reader.read()

    def _close_write(self):
        if self._write_open:
            os.close(self.write_end)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self._read_end)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_putchar_fd_string(pipe):
    count = putchar_fd("x", pipe.write_end)
    data = pipe.read()
    assert data == b"x"
    assert count == len(data)


def test_putchar_fd_int_is_one_byte(pipe):
    count = putchar_fd(ord("A"), pipe.write_end)
    data = pipe.read()
    assert data == b"A"
    assert count == 1


def test_putchar_fd_int_masked(pipe):
    putchar_fd(0x100 + ord("B"), pipe.write_end)
    assert pipe.read() == b"B"


def test_putchar_fd_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe.write_end)


def test_putstr_fd_round_trip(pipe):
    text = "ants move é"
    count = putstr_fd(text, pipe.write_end)
    data = pipe.read()
    assert data.decode("utf-8") == text
    assert count == len(data)


def test_putstr_fd_none_writes_nothing(pipe):
    count = putstr_fd(None, pipe.write_end)
    data = pipe.read()
    assert (count, data) == (0, b"")


def test_putendl_fd_appends_newline(pipe):
    putendl_fd("room", pipe.write_end)
    assert pipe.read() == b"room\n"


def test_putendl_fd_none_writes_nothing(pipe):
    count = putendl_fd(None, pipe.write_end)
    data = pipe.read()
    assert (count, data) == (0, b"")


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 10**20])
def test_putnbr_fd_round_trip(pipe, n):
    count = putnbr_fd(n, pipe.write_end)
    data = pipe.read()
    assert int(data.decode("ascii")) == n
    assert count == len(data)


def test_putnbr_fd_int_min(pipe):
    putnbr_fd(-2147483648, pipe.write_end)
    assert pipe.read() == b"-2147483648"


def test_stdout_variants(capfd):
    putchar("a")
    putstr("bc")
    putendl("d")
    putnbr(-12)
    out = capfd.readouterr().out
    assert out == "abcd\n-12"