# ftkit

A compact toolbox of everyday helpers: ASCII character classification,
C-style string and byte-buffer operations, splitting, stream output, a small
`printf`, buffered line reading, a singly linked list, string tables and
UTF-8 character handling.

ftkit is a plain library with no third-party dependencies. It has no
command-line program.

## Installation

```
pip install ftkit
```

For running the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `ftkit.chars` | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `isspace`, `isupper`, `islower`, `toupper`, `tolower`, `is_charset`, `string_lower`; each accepts a one-character string or an integer code |
| `ftkit.numbers` | `atoi` (wraps to a signed 32-bit value), `nbrlen`, `itoa`, `dtoa` (truncated, never rounded) |
| `ftkit.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` on `bytearray`/`memoryview` buffers, and `calloc` returning a zeroed `bytearray` |
| `ftkit.cstring` | `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strncpy`; strings end at their first NUL, searches return an index or `None`, and `strlcpy`/`strlcat` return the resulting text together with the length that was aimed for |
| `ftkit.textops` | `strndup`, `substr`, `strjoin`, `strjoin_list`, `charjoin`, `strtrim`, `strmapi`, `striteri`, `count_char`, `count_chars`, `trunc`, `strreplace`, `strsameedge`, `append` |
| `ftkit.split` | `count_words`, `split` (on any of a set of characters), `split_quote` (keeps quoted stretches whole), `strsplit` (on a whole separator string) |
| `ftkit.colors` | ANSI escape sequences (`RESET`, `RED`, `BOLDGREEN`, ...) and RGB values (`HEX_RED`, ...) |
| `ftkit.output` | `putchar`, `putstr`, `putendl`, `putnbr`, `putlnbr`, `putnbr_base`, `putnbr_unsigned`, `putnbr_float`, `putpointer` |
| `ftkit.printf` | `printf`, `fprintf` supporting `%c %s %p %d %i %u %f %x %X %%` |
| `ftkit.lines` | `LineReader` (iterable, with `next_line()`) and `get_lines` |
| `ftkit.linkedlist` | `LinkedList` with `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`, `show`, `len()` and iteration |
| `ftkit.table` | `tabdel`, `tabdup`, `tabinsert`, `tabjoin`, `tablen`, `tabprint` on lists of strings |
| `ftkit.utf8` | `is_ascii`, `is_two_byte`, `is_three_byte`, `is_four_byte`, `split_chars`, `join_chars` |

The output helpers and `printf`/`fprintf` write to the text stream given
(standard output when it is `None`) and return the number of characters
written.

## Examples

```python
import io

from ftkit.numbers import atoi, dtoa, itoa
from ftkit.split import split, split_quote
from ftkit.printf import fprintf
from ftkit.lines import LineReader, get_lines
from ftkit.linkedlist import LinkedList
from ftkit.utf8 import join_chars, split_chars

atoi("  -42abc")                       # -42
itoa(-2147483648)                      # "-2147483648"
dtoa(-1.5, 2)                          # "-1.50"
split("  hello   world ", " ")         # ["hello", "world"]
split_quote('echo "a b" c', " ", '"')  # ['echo', '"a b"', 'c']

out = io.StringIO()
count = fprintf(out, "%s=%d (%x)\n", "answer", 42, 42)
out.getvalue()                         # "answer=42 (2a)\n"

for line in LineReader(io.StringIO("one\ntwo\n"), 4096):
    print(line, end="")                # lines keep their newline

get_lines(io.StringIO("a\n\nb\n"))     # ["a", "b"]

items = LinkedList(["a", "b"])
items.add_back("c")
list(items.map(str.upper))             # ["A", "B", "C"]

pieces = split_chars("héllo".encode())  # [b"h", b"\xc3\xa9", b"l", b"l", b"o"]
join_chars(pieces).decode()            # "héllo"
```