# shellds

Small building blocks for shell-like programs. The package has no
dependencies outside the standard library.

## Modules

- `shellds.chars`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`) and case conversion
  (`to_lower`, `to_upper`). Each function takes a one-character string or
  an integer code. The case conversions return the same kind of value they
  were given.
- `shellds.numbers`: lenient integer parsing with `atoi` and `atoll`. Both
  skip leading whitespace, accept one sign and stop at the first non-digit.
  Results wrap to 32 or 64 bits. Formatting uses `itoa`, which raises
  `OverflowError` outside the 32-bit range, and `lltoa`, which narrows its
  argument to 32 bits before formatting.
- `shellds.output`: `put_char`, `put_str`, `put_endl` and `put_number`
  write to a text stream, standard output by default. `put_str` and
  `put_endl` write nothing for `None`.
- `shellds.search`: searching and comparing strings and bytes.
  - `find_char` and `find_last_char` find a character. Searching for the
    NUL character gives the string length.
  - `find_within` and `find_substring` find a substring, and `contains`
    tests for one.
  - `compare_prefix` compares the leading characters of two strings.
  - `ends_with` tests the end of a string.
  - `find_byte` and `compare_bytes` search and compare bytes.
  - Positions are indexes, or `None` when nothing matches.
- `shellds.text`: string helpers. They are `length`, `duplicate`,
  `append`, `join`, `split`, `map_chars`, `trim` and `substring`, plus the
  size-limited `bounded_copy` and `bounded_concat`. The two bounded
  helpers return the resulting text together with the length the result
  would have had without the limit. `split` drops empty words.
- `shellds.keys`: the key ordering used by the tree (`compare_keys`,
  `less`, `greater`, `equal`). `None` counts as a missing key.
- `shellds.tree`: `StringTree` is a self-balancing binary search tree that
  maps string keys to optional string values.
  - It supports `len()`, `in` and iteration over `(key, value)` pairs in
    key order.
  - Its methods are `insert`, `remove`, `get`, `get_range`, `contains`,
    `find_min`, `find_max`, `height`, `copy`, `clear` and `traverse`.
  - `insert` with a `None` value keeps an existing value.
  - `traverse` takes a `TraverseOrder` (`PREORDER`, `INORDER` or
    `POSTORDER`). Without a visitor it prints each entry as `key=value`.
- `shellds.strlist`: `StringList` is a doubly linked list of strings built
  from `ListNode` objects.
  - It supports `len()` and iteration, and `nodes()` yields the nodes
    themselves.
  - Adding values: `push_back`, `push_front`, `insert_after` and
    `extend_move`.
  - Removing values: `remove_value`, `remove_value_range`, `remove_node`,
    `remove_at`, `pop_back`, `pop_front` and `clear`.
  - Looking values up: `at`, `count`, `find`, `find_if` and `index_of`.
  - Other methods: `empty`, `copy` and `to_list`.
  - `pop_back`, `pop_front`, `at` and `remove_at` raise `IndexError` when
    the list is empty or the index is out of range.
  - Free functions: `matches`, `find_word`, `find_word_range`,
    `copy_range`, `size_from` and `values_from`.
- `shellds.tree_lines`: converts between `KEY=VALUE` lines and a
  `StringTree`, the way an environment is stored.
  - `from_sorted_lines` builds a balanced tree from lines that are already
    sorted. A line without the delimiter becomes a key with an empty value.
  - `from_lines` inserts the lines one by one, in any order. It raises
    `ValueError` for a line without the delimiter.
  - `to_lines` returns the entries as sorted `key=value` lines.

## Installation

```
pip install .
```

## Example

```python
from shellds.tree import StringTree, TraverseOrder
from shellds.tree_lines import from_lines, to_lines

env = from_lines(["PATH=/bin", "HOME=/home/user"], "=")
env.insert("SHELL", "/bin/sh")
print(env.get("HOME"))          # /home/user
print("PATH" in env, len(env))  # True 3
print(to_lines(env))            # ['HOME=/home/user', 'PATH=/bin', 'SHELL=/bin/sh']
env.traverse(TraverseOrder.INORDER)  # prints each key=value line

from shellds.strlist import StringList

args = StringList(["echo", "hello", "world"])
args.remove_value("hello")
print(args.to_list())           # ['echo', 'world']
```

## What it does not do

This is a library of data structures and string helpers only. It contains
no shell:

- no command-line program or prompt;
- no parsing of command lines;
- no running of commands;
- no signal handling.

## Running the tests

```
pip install .[test]
pytest
```