# ftlib

A small library of low-level helpers with C-like semantics: character
classification, 32-bit number conversion, byte-buffer operations, string
functions, a minimal formatter, a singly linked list and a line reader for
file descriptors. It has no dependencies beyond the standard library.

## Modules

- `ftlib.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes a one-character string or an integer
  code; case conversion returns the same kind it was given.
- `ftlib.numbers`: `atoi(text)` parses a leading decimal integer (leading
  whitespace skipped; one `-` negates, any other run of several signs gives 0;
  arithmetic wraps at 32 bits). `itoa(n)` returns the decimal text of a 32-bit
  signed integer and raises `OverflowError` outside that range.
- `ftlib.memory`: operations on `bytearray` buffers: `memset`, `bzero`,
  `calloc`, `memchr` (returns an index or `None`), `memcmp`, `memcpy`, and
  `memmove(buf, dest_offset, src_offset, n)` for overlapping moves within one
  buffer. Counts larger than a buffer raise `ValueError`.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write to
  a file descriptor with `os.write`.
- `ftlib.strings`: `split`, `strchr`, `strrchr`, `strnstr` (these return
  indexes or `None`), `strncmp`, `strtrim`, `substr`, `strjoin`, `strmapi`,
  `striteri`, and `strlcpy` / `strlcat`, which work on NUL-terminated
  `bytearray` buffers and return the length they tried to create.
- `ftlib.printf`: `render(fmt, *args)` supports `%d %i %c %s %x %X %u %p %%`;
  spaces between `%` and the letter are skipped and unknown letters produce
  nothing. `printf(fmt, *args)` writes the result to standard output and
  returns the number of bytes written. Also `to_hex`, `pointer_repr` and
  `unsigned_repr`.
- `ftlib.lists`: `Node` and `LinkedList` with `add_front`, `add_back`, `last`,
  `iterate`, `clear`, `map` and `nodes`; a list is iterable over its contents,
  supports `len()`, and can be built from an iterable.
- `ftlib.reader`: `LineReader(fd, buffer_size=15)` with `read_line()` returning
  `bytes` lines (newline included) or `None` at end of input, and
  `read_lines(fd, buffer_size)` yielding every remaining line.

## Installation

```
pip install .
```

## Examples

```python
from ftlib.numbers import atoi, itoa
from ftlib.strings import split, strtrim
from ftlib.printf import render

atoi("  -42abc")              # -42
itoa(-2147483648)             # "-2147483648"
split("hello! 1234", " ")     # ["hello!", "1234"]
strtrim("abcxxxyabc", "abc")  # "xxxy"
render("%d is %x in hex", 255, 255)  # "255 is ff in hex"
```

Reading lines from a file descriptor:

```python
import os
from ftlib.reader import read_lines

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in read_lines(fd, 15):
        print(line.decode("utf-8"), end="")
finally:
    os.close(fd)
```

## Running the tests

```
pip install ".[test]"
pytest
```