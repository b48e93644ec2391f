# ftkit

A small library of plain helpers: ASCII character classification, in-place
byte-buffer operations, string utilities that treat a NUL character as the
end of a string, output to open file descriptors, and a singly linked list.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.charclass`

ASCII-only predicates and case conversion. Every function takes an integer
character code or a one-character string; anything else raises `TypeError`,
and a string of another length raises `ValueError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0–127),
  `is_print` (codes 32–126) return `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return a value of the
  same kind they were given.

```python
from ftkit.charclass import is_alpha, to_upper

is_alpha(ord("a"))   # True
to_upper(ord("q"))   # ord("Q")
to_upper("q")        # "Q"
```

### `ftkit.memory`

Operations on byte buffers. Mutating functions work in place on a
`bytearray` and return it. A negative count, or one reaching past the end of
a buffer, raises `ValueError`.

- `memset(buffer, value, n)` – set the first `n` bytes to `value` modulo 256.
- `bzero(buffer, n)` – zero the first `n` bytes.
- `memcpy(dest, src, n)` – copy `n` bytes from `src` to the start of `dest`.
- `memmove(buffer, dest_offset, src_offset, n)` – overlap-safe copy within
  one buffer.
- `memchr(data, value, n)` – index of the first matching byte, or `None`.
- `memcmp(a, b, n)` – difference of the first differing unsigned bytes, or 0.
- `calloc(count, size)` – a zero-filled `bytearray` of `count * size` bytes;
  raises `OverflowError` if the total would not fit a 64-bit size.

```python
from ftkit.memory import calloc, memset

buf = calloc(4, 2)
memset(buf, ord("x"), 3)   # bytearray(b"xxx\x00\x00\x00\x00\x00")
```

### `ftkit.strings`

String utilities. A `"\0"` in the input ends the string; anything after it is
ignored. Searches return an index, or `None` when nothing is found.

- `strlen`, `strdup`, `strjoin`, `substr(s, start, length)`,
  `strtrim(s, charset)`.
- `strchr`, `strrchr` – first / last index of a character; searching for
  NUL gives the string's length.
- `strncmp(s1, s2, n)` – code difference of the first differing pair, or 0.
- `strnstr(haystack, needle, length)` – first match lying wholly within the
  first `length` characters; an empty needle matches at 0.
- `strlcpy(dest, src, size)`, `strlcat(dest, src, size)` – bounded,
  NUL-terminating copies into a `bytearray`; they return the length of the
  string they tried to create.
- `atoi` – skips leading whitespace, takes one optional sign and the
  following digits; returns 0 when there are none and wraps like a 32-bit
  signed integer.
- `itoa` – decimal text of a 32-bit signed integer; raises `OverflowError`
  outside that range.
- `split(s, sep)` – words separated by runs of `sep`, empty words dropped.
- `strmapi(s, f)` – new string from `f(index, char)`.
- `striteri(chars, f)` – replaces each element of a mutable sequence in place
  with `f(index, element)`; a `None` result leaves it unchanged.

```python
from ftkit.strings import split, strtrim, atoi, itoa

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxabcxx", "x")          # "abc"
atoi("   -42abc")                # -42
itoa(-2147483648)                # "-2147483648"
```

### `ftkit.output`

Writing to an open file descriptor with `os.write`: `put_char`, `put_str`,
`put_endl` and `put_nbr`. Text is encoded as UTF-8. A negative descriptor
writes nothing; `put_str(None, fd)` writes nothing, and `put_endl(None, fd)`
writes only the newline.

```python
from ftkit.output import put_endl, put_nbr

put_endl("done", 1)
put_nbr(-123, 1)
```

### `ftkit.linkedlist`

`Node` (a `content` and a `next` link) and `LinkedList`, a singly linked list
reached through its `head`. `len()` counts nodes and iteration yields
contents.

- `push_front(node)`, `push_back(node)` – link a `Node` at either end; any
  other object raises `TypeError`.
- `last()` – the last node, or `None`.
- `pop_front(delete=None)` – unlink the head and return its content; raises
  `IndexError` on an empty list.
- `clear(delete=None)` – remove every node, calling `delete` on each content.
- `for_each(f)` – call `f` on every content.
- `map(f, delete=None)` – a new list of `f(content)`; if `f` raises, the
  contents produced so far are passed to `delete` and the exception
  propagates.

```python
from ftkit.linkedlist import LinkedList, Node

lst = LinkedList([1, 2, 3])
lst.push_front(Node(0))
doubled = lst.map(lambda x: x * 2)
list(doubled)   # [0, 2, 4, 6]
```

## What it does not do

ftkit is a library only: it installs no command-line tool. It does no
Unicode-aware classification or case mapping, and its memory functions work
on Python buffers rather than raw memory.