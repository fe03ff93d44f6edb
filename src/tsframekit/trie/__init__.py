"""Trie module for tsframekit.

Provides the multi-key dictionary.
"""

from .multimap import MultikeyDictionary, MultiMap

__all__ = [
    "MultiMap",
    "MultikeyDictionary",
]
