# cub3d

The groundwork of a first-person maze viewer: a set of small, dependency-free
helpers for characters, byte buffers, strings, line-by-line file reading,
linked lists and formatted output. They live in the `cub3d.libft`
sub-package.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

### `cub3d.libft.chars`

ASCII classification and case conversion. Each function takes a character
either as an `int` code or as a one-character `str`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return a `bool`.
- `to_lower`, `to_upper` change the case of an ASCII letter and return the
  same kind of value they were given; anything else comes back unchanged.

### `cub3d.libft.memory`

Operations on `bytearray` / `bytes`. A byte count or range that does not fit
the buffer raises `ValueError`.

- `memset(buffer, value, n)` fills the first `n` bytes (value taken modulo 256)
  and returns the buffer; `bzero(buffer, n)` zeroes them.
- `memcpy(dest, src, n)` copies `n` bytes and returns `dest`; it returns `None`
  when both are `None`.
- `memmove(buffer, dest, src, n)` copies `n` bytes inside one buffer between
  offsets, overlap allowed.
- `memchr(data, value, n)` gives the index of the first matching byte or `None`.
- `memcmp(a, b, n)` returns the difference at the first mismatch, or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size` bytes.

### `cub3d.libft.strings`

C-style string routines; text after a NUL character is ignored.

- `strlen(s)`, `strdup(s)`.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple of the
  resulting text and the length the full result would have had.
- `strchr(s, c)`, `strrchr(s, c)` and `strnstr(big, little, n)` return an
  index or `None`.
- `strncmp(s1, s2, n)` returns the code difference at the first mismatch.
- `atoi(s)` skips leading whitespace, takes one optional sign, reads digits
  and wraps the result to a signed 32-bit integer.

```python
from cub3d.libft.strings import atoi, strlcpy

atoi("  -123s")        # -123
strlcpy("hello", 3)    # ("he", 5)
```

### `cub3d.libft.lines`

- `LineReader(stream, buffer_size=256)` reads a text stream `buffer_size`
  characters at a time. `next_line()` returns the next line with its newline
  kept, or `None` at the end; the reader is also iterable.
- `read_lines(filename)` yields the lines of a UTF-8 file.

### `cub3d.libft.transform`

- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, chars)`.
- `split(s, delim)` splits on a single-character delimiter and drops empty
  pieces: `split("  coso  42  ", " ")` gives `["coso", "42"]`.
- `itoa(n)` returns the decimal text of an integer.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, s)` for each element of a mutable
  sequence, stopping at a NUL, so `f` can change it in place.

### `cub3d.libft.linked_list`

`LinkedList(items=())` is a singly linked list of `Node` cells
(`content`, `next`). It supports `add_front`, `add_back`, `len()`, iteration,
`last()`, `clear(delete=None)`, `iterate(f)` and `map(f, delete=None)`, which
returns a new list; if `f` raises, the contents already produced are passed to
`delete` and the exception propagates.

### `cub3d.libft.output`

Writers that return the number of characters written, to a given text stream
or to standard output by default: `put_char`, `put_str` (`"(null)"` for
`None`), `put_endl`, `put_nbr` (signed 32-bit), `put_unbr` (unsigned 32-bit),
`put_hex` and `put_ptr` (`"(nil)"` for `None` or zero).

`printf(fmt, *args)` writes to standard output and supports the `c`, `s`,
`d`, `i`, `p`, `u`, `x`, `X` and `%` conversions; unknown conversions produce
nothing.

```python
from cub3d.libft.output import printf

printf("%d %x %X %%\n", -42, 255, 255)   # prints "-42 ff FF %"
```

## What the package does not do

The package has no command to run and opens no window. It does not read
`.cub` scene files, check wall texture paths or floor and ceiling colours,
validate a map or find the player in it, and has no rendering or keyboard
handling. What it offers is the helper library described above.