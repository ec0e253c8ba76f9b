"""Protocols and enums for the word index implementations.

This module defines the operation contract shared by the compressed trie,
the reference trie and the dict-backed oracle, so that harness code can
drive any of them interchangeably.
"""

from enum import Enum, auto
from typing import List, Optional, Protocol, Tuple, TypeVar, runtime_checkable

V = TypeVar('V')


class NodeKind(Enum):
    """Kind tag of a compressed trie node.

    The set is closed: every dispatch over nodes handles exactly these
    three kinds.
    """
    BRANCH = auto()        # Fan-out point, not itself a stored key
    VALUE_BRANCH = auto()  # Fan-out point that also terminates a stored key
    LEAF = auto()          # Verbatim suffix of exactly one stored key


@runtime_checkable
class WordIndex(Protocol[V]):
    """Protocol for objects that store a set of string keys.

    Implementations:
    - CompressedTrie: radix-style trie (the production structure)
    - ReferenceTrie: one node per character, used as a correctness oracle
    - SetIndex: plain dictionary, used as a correctness oracle
    """

    def insert(self, key: str, value: Optional[V] = None) -> None:
        """Store key with an attached value.

        Inserting an empty key is a no-op. Re-inserting an existing key
        keeps the value that is already stored.
        """
        ...

    def exists(self, key: str) -> bool:
        """Return True if key was inserted."""
        ...

    def value_at(self, key: str) -> Tuple[bool, Optional[V]]:
        """Return (found, value) for an exact key."""
        ...

    def prefix_match(self, prefix: str) -> Tuple[bool, str]:
        """Return (found, key) for the smallest stored key with this prefix."""
        ...

    def get_words(self) -> List[str]:
        """Return every stored key, in no particular order."""
        ...
