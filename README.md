# wordhash

A small chained hash table for lowercase English words, built on a singly
linked list.

A word's key is the sum of the alphabet positions of its lowercase letters.
`a` counts as 0 and `z` counts as 25. Characters outside `a`–`z` add nothing
to the key. Words that share a key are kept in the same chain, in the order
they were inserted. Each chain is a `LinkedList`. By default the table has
500 slots, which leaves room for words of about twenty letters.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
wordhash [WORDS_FILE] [WORD]
```

The command reads `WORDS_FILE`, which holds one word per line. If you leave
it out, it reads `./ressources/words.txt` from the current directory. It then
writes every slot of the table, with the words stored in each slot, to
standard output. Last, it looks up `WORD` and prints `found` or `not found`.
If you leave `WORD` out, it looks up `car`.

If the file cannot be opened, the command writes an error to standard error
and exits with status 1.

The dump is long, so you may want to send it to a file:

```
wordhash > table.txt
```

`python -m wordhash.cli` runs the same command.

## Library use

### `wordhash.hash_table`

```python
from wordhash.hash_table import HashTable, get_hash_key

table = HashTable(500)          # the size defaults to KEYS_STORE_LENGTH (500)
table.insert("car")
table.insert("arc")             # same key as "car"
print(get_hash_key("car"))      # 19
print(table.contains("car"))    # True
print(table.size)               # 500

table.load("words.txt")         # one word per line
with open("table.txt", "w") as out:
    table.dump(out)             # defaults to stdout
table.clear()                   # empties every chain
```

- `get_hash_key(data)` raises `ValueError` if the key is greater than 500.
- `insert` computes the key from every lowercase letter in the string. It
  stores only the run of lowercase letters at the start of the string, which
  it cuts at the first other character. This strips the line endings from
  words read from a file.
- `insert` and `contains` raise `IndexError` if the key does not fit the
  table's size.
- `load` reads the file as UTF-8. It splits each line into pieces of at most
  31 characters and inserts each piece.
- `contains` returns `False` when the word's chain is empty.

### `wordhash.linked_list`

The linked list can be used by itself:

```python
from wordhash.linked_list import LinkedList

items = LinkedList(["pear", "apple", "fig"])
items.push("kiwi")
items.bubble_sort()             # natural order; or bubble_sort(length, cmp)
print(list(items))              # ['apple', 'fig', 'kiwi', 'pear']

items.update_at(1, "grape")     # replace position 1; past the end, append
items.swap(0, 2)                # the first position must be the smaller one
clone = items.copy()
items.contains("pear")          # with ==, or pass cmp returning 0 on a match
items.print()                   # one value per line; or print(printer)
items.clear()
```

A comparator takes two values and returns a negative number, zero or a
positive number. `bubble_sort(length, cmp)` sorts only the first `length`
elements, and it stops early once a pass makes no swaps.

`update_at`, `swap`, `contains`, `copy` and `bubble_sort` raise `ValueError`
on an empty list. They also raise `ValueError` for negative positions, for a
length that is not positive, and when the two positions given to `swap` are
out of order. `swap` raises `IndexError` if the second position is past the
end of the list.

## What it does not do

Words are never removed one at a time. You can only empty the whole table
with `clear`. Only lowercase ASCII letters are used for keys and stored
words.