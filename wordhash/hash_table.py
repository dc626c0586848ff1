"""A chained hash table of lowercase words keyed by the sum of letter offsets."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from os import PathLike
from typing import TextIO

from wordhash.linked_list import LinkedList

KEYS_STORE_LENGTH = 500
ORD_OFFSET = ord("a")
_CHUNK_SIZE = 31
_SEPARATOR = "[--------------------------------------------------------]"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def get_hash_key(data: str) -> int:
    """Sum the offsets from ``'a'`` of the lowercase letters in ``data``."""
    key = sum(ord(char) - ORD_OFFSET for char in data if _is_lower(char))
    if key > KEYS_STORE_LENGTH:
        raise ValueError(f"hash key {key} exceeds {KEYS_STORE_LENGTH}")
    return key


def _leading_word(data: str) -> str:
    for index, char in enumerate(data):
        if not _is_lower(char):
            return data[:index]
    return data


def _chunks(text: str) -> Iterator[str]:
    for line in text.splitlines(keepends=True):
        for start in range(0, len(line), _CHUNK_SIZE):
            yield line[start:start + _CHUNK_SIZE]


class HashTable:
    """Words stored in chains, one chain per hash key."""

    def __init__(self, size: int = KEYS_STORE_LENGTH) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._store = [LinkedList() for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._store)

    def _chain(self, key: int) -> LinkedList:
        if key >= len(self._store):
            raise IndexError(f"hash key {key} is outside a table of size {len(self._store)}")
        return self._store[key]

    def insert(self, data: str) -> None:
        """Store the leading lowercase run of ``data`` under the hash of all its lowercase letters."""
        self._chain(get_hash_key(data)).push(_leading_word(data))

    def load(self, filename: str | PathLike[str]) -> None:
        """Insert every line of a file, reading lines in pieces of at most 31 characters."""
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
        for piece in _chunks(text):
            self.insert(piece)

    def contains(self, data: str) -> bool:
        """Tell whether ``data`` is stored in its chain."""
        chain = self._chain(get_hash_key(data))
        return bool(chain) and chain.contains(data)

    def dump(self, out: TextIO | None = None) -> None:
        """Write every chain, hash by hash, to ``out`` (default stdout)."""
        stream = out if out is not None else sys.stdout
        stream.write("CONSIDER REDIRECTING THE OUTPUT TO A TXT FILE")
        for key, chain in enumerate(self._store):
            stream.write(f"\n{_SEPARATOR}\n")
            stream.write(f"When hash = {key}, values are as follows : \n")
            chain.print(lambda word: stream.write(f"{word}\n"))

    def clear(self) -> None:
        """Empty every chain."""
        for chain in self._store:
            chain.clear()