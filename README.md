# fdfkit

Small helpers modelled on the classic C string and memory routines, a
minimal `printf`, a buffered line reader, a singly linked list, and the
geometry for drawing wire-frame maps: an isometric projection and a
Bresenham line rasteriser.

## Modules

- `fdfkit.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each takes an integer code or a one-character string. The case functions
  return the same kind of value they were given.
- `fdfkit.memory`: operations on byte buffers: `memset`, `bzero`, `memcpy`,
  `memmove` (offsets within one buffer, overlap allowed), `memchr` (returns
  an index or `None`), `memcmp`, and `calloc` (a zero-filled `bytearray`,
  `OverflowError` if `count * size` would overflow a 64-bit size).
- `fdfkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `strlcpy`, `strlcat`, `substr`, `strjoin`. Searches return indices
  or `None`; searching for NUL finds the end of the string. `strlcpy` and
  `strlcat` return a `(text, length)` pair, where `length` is the length the
  untruncated result would have had.
- `fdfkit.text`: `atoi` (leading whitespace, one optional sign, digits;
  wraps to 32 bits), `itoa` (32-bit range only), `split` (non-empty runs
  between separators), `strtrim`, `strmapi`, `striteri`.
- `fdfkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  given text stream or to standard output.
- `fdfkit.linked_list`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration over
  contents. `LinkedList` can be built from any iterable.
- `fdfkit.printf`: `render(fmt, *args)` returns the formatted text and
  `printf(fmt, *args, stream=None)` writes it and returns its length.
  Supported conversions: `%c %s %p %d %i %u %x %X %%`. Integers wrap as
  32-bit values; `None` prints as `(null)` for `%s` and `(nil)` for `%p`;
  unknown conversions print nothing. The `format_hex`, `format_pointer`,
  `format_unsigned`, `format_int` and `format_str` helpers are available
  on their own.
- `fdfkit.line_reader`: `LineReader(source, buffer_size=42)` reads lines,
  newline included, from a file descriptor or any object with `read(size)`,
  returning `str` or `bytes` to match the source. `read_line()` returns
  `None` when no data is left; iterating stops there.
- `fdfkit.draw`: `isometric(x, y, z)` projects a grid point to whole-pixel
  screen coordinates; `line_points` yields every pixel of a line, both ends
  included; `draw_line(put_pixel, x0, y0, x1, y1, color)` calls
  `put_pixel(x, y, color)` for each of them. `WIDTH`, `HEIGHT`, `SCALE` and
  `ANGLE` hold the default window size, grid scale and projection angle.
- `fdfkit.errors`: `fatal(message, stream=None)` writes `Error: <message>`
  and raises `SystemExit(1)`.

## Installation

```
pip install .
```

## Examples

```python
from fdfkit.text import split, atoi
from fdfkit.printf import render
from fdfkit.draw import isometric, line_points

split("Hello my name is", " ")       # ['Hello', 'my', 'name', 'is']
atoi("  -42abc")                     # -42
render("%d in hex is %x", 255, 255)  # '255 in hex is ff'

isometric(1, 0, 0)                   # projected (x, y)
list(line_points(0, 0, 3, 1))        # pixels on the line, endpoints included
```

Reading a file line by line:

```python
from fdfkit.line_reader import LineReader

with open("map.fdf", "rb") as handle:
    for line in LineReader(handle):
        ...
```

## What it does not do

fdfkit is a library only. It has no command-line program, opens no window
and draws nothing on screen: `draw_line` hands each pixel to the callback
you supply. It does not parse map files into a height grid or render a
whole map; you combine `LineReader`, `split`, `atoi`, `isometric` and
`draw_line` yourself for that.

## Running the tests

```
pip install .[test]
pytest
```