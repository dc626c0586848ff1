"""Command line entry: load a word list, dump the table and look up one word."""

from __future__ import annotations

import argparse
import sys

from wordhash.hash_table import KEYS_STORE_LENGTH, HashTable

DEFAULT_WORDS_FILE = "./ressources/words.txt"
DEFAULT_WORD = "car"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordhash",
        description="Load words into a hash table, print it and search for a word.",
    )
    parser.add_argument("words_file", nargs="?", default=DEFAULT_WORDS_FILE)
    parser.add_argument("word", nargs="?", default=DEFAULT_WORD)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    table = HashTable(KEYS_STORE_LENGTH)
    try:
        table.load(args.words_file)
    except OSError as error:
        print(f"wordhash: {error}", file=sys.stderr)
        return 1
    table.dump()
    found = table.contains(args.word)
    print("found" if found else "not found")
    table.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())