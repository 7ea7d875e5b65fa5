import os

import pytest

from ftlib.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(pipe):
    r, w = pipe
    os.close(w)
    chunks = []
    while True:
        chunk = os.read(r, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_str(pipe):
    putchar_fd("A", pipe[1])
    assert _drain(pipe) == b"A"


def test_putchar_int_is_raw_byte(pipe):
    putchar_fd(ord("z"), pipe[1])
    assert _drain(pipe) == b"z"


def test_putchar_rejects_multichar(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe[1])


def test_putstr(pipe):
    putstr_fd("HELLO", pipe[1])
    assert _drain(pipe) == b"HELLO"


def test_putstr_empty(pipe):
    putstr_fd("", pipe[1])
    assert _drain(pipe) == b""


def test_putendl_appends_newline(pipe):
    text = "Hello, World!"
    putendl_fd(text, pipe[1])
    assert _drain(pipe) == text.encode() + b"\n"


def test_sequence_of_writes_concatenates(pipe):
    putstr_fd("ab", pipe[1])
    putchar_fd("c", pipe[1])
    putendl_fd("d", pipe[1])
    assert _drain(pipe) == b"abcd\n"


@pytest.mark.parametrize("n", [0, 6, 42, -987654, 2147483647])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe[1])
    assert int(_drain(pipe)) == n


def test_putnbr_int_min(pipe):
    putnbr_fd(-2147483648, pipe[1])
    assert _drain(pipe) == b"-2147483648"


def test_putnbr_out_of_range(pipe):
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, pipe[1])