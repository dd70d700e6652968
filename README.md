# minishell

Building blocks for a small command shell: handling of an environment kept
as `KEY=VALUE` strings, string and byte helpers with C semantics, a
`printf`-style formatter, stream writers, and a line reader.

## Installing

```
pip install .
```

## Environment — `minishell.env`

- `update_env_var(env, key, value)` replaces the first `key=...` entry in a
  list with `key=value` and returns `True`; when the key is absent nothing is
  added and it returns `False`.
- `lookup_variable(arg, env)` takes a `$NAME` argument, skips its first
  character and returns the value of `NAME`, or `None`.
- `format_env(env)` renders the entries one per line.

```python
from minishell.env import format_env, lookup_variable, update_env_var

env = ["HOME=/home/user", "PWD=/"]
update_env_var(env, "PWD", "/tmp")      # True
lookup_variable("$HOME", env)           # "/home/user"
format_env(env)                         # "HOME=/home/user\nPWD=/tmp\n"
```

## Strings — `minishell.search`, `minishell.copying`, `minishell.chars`

`search` has `strlen`, `strchr`, `strrchr`, `strnstr`, `strcmp` and
`strncmp`. Positions come back as indices, a missing match as `None`, and
searching for `"\0"` gives the index just past the end. `strcmp` returns the
difference of the first differing characters.

`copying` has `strlcpy`, `strlcat`, `strcpy`, `strcat` and `strdup`. As
strings are immutable, they return the new destination; `strlcpy` and
`strlcat` return it together with the length they report:

```python
from minishell.copying import strlcat, strlcpy

strlcpy("", "hello", 3)    # ("he", 5)
strlcat("ab", "cdef", 5)   # ("abcd", 6)
```

`chars` has `atoi`, `itoa`, and the ASCII tests and mappings `isalpha`,
`isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and `tolower`, which
take a one-character string or an integer code.

## Bytes — `minishell.memory`

`bzero`, `calloc`, `memccpy`, `memchr`, `memcmp`, `memcpy`, `memmove` and
`memset` work on `bytearray` objects in place. `memmove(buf, dest, src, n)`
moves `n` bytes between two offsets of the same buffer, overlap included.
A range that runs outside a buffer raises `ValueError`.

## Formatting — `minishell.printf`

`format_string(fmt, *args)` handles `%c %s %p %d %i %u %x %X` and `%%`, with
32-bit integer wrapping; `None` prints as `(null)` for `%s` and `(nil)` for
`%p`. Too few arguments raise `TypeError`. `printf` writes the result to
standard output and returns its length.

```python
from minishell.printf import format_string

format_string("%d %x %s", -1, 255, None)   # "-1 ff (null)"
```

## Output — `minishell.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to a text
stream, a binary stream or a file descriptor number.

## Reading lines — `minishell.nextline`

`LineReader(source, buffer_size=1)` reads from a file object or descriptor
and returns one line at a time from `next_line()`, keeping the newline and
whatever was read past it; it returns `None` at the end. It can also be
iterated. `get_next_line(reader)` is the same as `reader.next_line()`.

```python
import io

from minishell.nextline import LineReader

list(LineReader(io.StringIO("a\nb")))   # ["a\n", "b"]
```

## What this package does not do

There is no interactive shell here: no command to start, no prompt, no
parsing of a line into commands, pipes or redirections, no builtins such as
`cd` or `echo`, and no running of other programs. The package offers only
the helpers described above.

## Tests

```
pip install .[test]
pytest
```