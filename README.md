# minishell

Helpers for a small interactive shell, written as plain Python modules:
the prompt text and blank-line check a read loop needs, and the character,
number, string, memory, output and linked-list utilities underneath them.
Most helpers follow C library semantics (NUL-terminated strings, lenient
number parsing, byte-count based memory functions) expressed with Python
types.

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Modules

| Module                 | What it holds                                                                 |
|------------------------|-------------------------------------------------------------------------------|
| `minishell.prompt`     | `make_prompt(cwd)` and `is_blank(text)`                                       |
| `minishell.chars`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_whitespace`, `to_upper`, `to_lower` |
| `minishell.numbers`    | `atoi`, `atol`, `atof`, `itoa`                                                |
| `minishell.strings`    | `strchr`, `strrchr`, `strnstr`, `strncmp`, `strcmp`, `strequ`                 |
| `minishell.memory`     | `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`          |
| `minishell.transform`  | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat` |
| `minishell.output`     | `put_char`, `put_str`, `put_endl`, `put_nbr`                                  |
| `minishell.linkedlist` | `Node` and `LinkedList`                                                       |

## Examples

The prompt shows the current directory, and is left without it when the
directory is unknown:

```python
from minishell.prompt import make_prompt, is_blank

make_prompt("/tmp")      # 'minishell:/tmp$ '
make_prompt(None)        # 'minishell:$ '
is_blank(" \t\n")        # True
is_blank("  ls ")        # False
```

Character predicates take a one-character string or an integer code:

```python
from minishell.chars import is_digit, to_upper

is_digit("7")            # True
to_upper("q")            # 'Q'
to_upper(ord("q"))       # 81
```

Numbers are read leniently: leading whitespace and one sign are accepted,
and reading stops at the first character that is not a digit. `atol`
clamps to the 64-bit limits on overflow.

```python
from minishell.numbers import atoi, atof, itoa

atoi("   -42abc")        # -42
atof("3.25xyz")          # 3.25
itoa(-2147483648)        # '-2147483648'
```

String searches return an index, or `None` when nothing is found;
comparisons return the difference of the first unequal characters:

```python
from minishell.strings import strchr, strcmp, strequ

strchr("hello", "l")     # 2
strchr("hello", "z")     # None
strcmp("abc", "abd")     # -1
strequ("cd", "cd")       # True
```

Memory helpers work in place on a `bytearray`:

```python
from minishell.memory import calloc, memset, memmove

buf = calloc(4, 2)       # bytearray(8) of zeros
memset(buf, 0x41, 3)     # bytearray(b'AAA\x00\x00\x00\x00\x00')
memmove(buf, 1, 0, 3)    # bytearray(b'AAAA\x00\x00\x00\x00')
```

Splitting drops empty fields, and trimming removes any of the given
characters from both ends. The bounded copy helpers return the new text
and the length that was needed:

```python
from minishell.transform import split, strtrim, strlcpy

split("a,,b,", ",")      # ['a', 'b']
strtrim("xxhixx", "x")   # 'hi'
strlcpy("", "hello", 3)  # ('he', 5)
```

Output helpers write to any text stream:

```python
import sys
from minishell.output import put_endl, put_nbr

put_endl("done", sys.stdout)
put_nbr(-17, sys.stdout)
```

A singly linked list with the usual operations:

```python
from minishell.linkedlist import LinkedList

items = LinkedList()
items.push_back(2)
items.push_front(1)
len(items)                                  # 2
items.last().content                        # 2
list(items.map(lambda value: value * 10))   # [10, 20]
items.clear()
len(items)                                  # 0
```

## What the package does not do

There is no shell to run here. The package offers no command, no
read-evaluate loop, no command-line parsing, no variable expansion, no
pipes or redirections, and no builtin commands such as `echo`, `cd` or
`env`. It provides the prompt and input checks and the utility modules
listed above, for use by a program that supplies those parts itself.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.