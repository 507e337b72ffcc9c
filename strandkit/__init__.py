"""Suffix trees, compact tries, superstring assembly and FASTA helpers for sequence strings."""

__version__ = "0.1.0"

__all__ = ["suffix_graph", "suffix_trie", "superstring", "trie_compact", "ukkonen", "util"]