# zedkit

A small collection of pure-Python utilities with no third-party dependencies.

## Modules

- `zedkit.chars`: ASCII character classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`), case conversion
  (`to_upper`, `to_lower`) and integer/text conversion (`atoi`, `itoa`).
  Characters may be given as one-character strings or as integer codes.
- `zedkit.textutils`: string and byte helpers: `word_count`, `split`,
  `find_char`, `rfind_char`, `strncmp`, `memcmp`, `memchr`, `strnstr`,
  `substr`, `strtrim`, `strmapi`, `striteri` and `strjoin`. Searches return
  an index, or `None` when nothing is found.
- `zedkit.colors`: colour helpers returning packed `0xRRGGBB` integers:
  `hsv_to_rgb`, `rainbow_gradient`, `trippy_gradient` and `teal_palette`.
- `zedkit.dates`: validators for `yyyy/mm/dd` dates (`is_date`) and
  `hh:mm:ss` times (`is_time`), plus `is_leap`, `is_thirty`,
  `is_valid_day` and `has_extension` for matching a file name's extension.
- `zedkit.linked`: a singly linked list, `LinkedList`, built from `Node`
  objects, with `add_front`, `add_back`, `last`, `iterate`, `map` and
  `clear`; it also supports `len()` and iteration.
- `zedkit.printf`: a minimal formatter for `%c %s %p %d %i %u %x %X %%`.
  `render` returns the text, `printf` writes it to a stream (stdout by
  default) and returns its length. Unknown conversions are kept as written;
  a lone `%` at the end of the format raises `ValueError`. Also
  `format_hex`, `format_pointer`, `format_signed`, `format_unsigned`,
  `put_str`, `put_endl` and `put_nbr`.
- `zedkit.lines`: `LineReader`, which reads one line at a time from integer
  file descriptors or from objects with a `read(size)` method, keeping each
  source's leftover data apart so several sources can be read in turn.
  `next_line` returns the next line (newline included) or `None` at the end,
  `lines` yields every remaining line, and `discard` drops what is buffered
  for a source.

## Installation

```
pip install .
```

## Examples

```python
from zedkit.chars import atoi, itoa
from zedkit.textutils import split
from zedkit.colors import hsv_to_rgb
from zedkit.dates import is_date, is_time
from zedkit.printf import render

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("a  b c", " ")      # ["a", "b", "c"]
hex(hsv_to_rgb(0, 1, 1))  # "0xff0000"
is_date("2020/12/04")     # True
is_time("25:00:00")       # False
render("%s=%x", "n", 255) # "n=ff"
```

Reading lines from a file descriptor:

```python
import os
from zedkit.lines import LineReader

reader = LineReader()
fd = os.open("data.txt", os.O_RDONLY)
for line in reader.lines(fd):
    print(line, end="")
os.close(fd)
```

## What this package does not do

It is a library only: it has no command-line tool and no graphical display.
The date and time validators check single stamps; the package does not check
or load whole data files, and it does not plot or render any data.

## Running the tests

```
pip install .[test]
pytest
```