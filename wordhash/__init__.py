"""Chained hash table of lowercase words, with its linked list and a command line entry."""

__version__ = "0.1.0"
__all__ = ["linked_list", "hash_table", "cli"]