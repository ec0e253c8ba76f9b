"""Compressed (radix-style) trie.

Chains of single-child nodes are stored as one Leaf holding the rest of the
key verbatim. Inserting a key that diverges inside a leaf splits it into a
chain of branches (see ``wordtrie.split``).
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .nodes import Branch, Leaf, Node, ValueBranch, make_tail, node_kind
from .protocols import NodeKind
from .split import breakup_leaf

logger = logging.getLogger(__name__)

V = TypeVar('V')


class LookupStatus(Enum):
    """Outcome of a descent through the trie."""
    NOT_FOUND = auto()
    FOUND = auto()                 # Walk ended on the node of a stored key
    FOUND_WITH_REMAINDER = auto()  # Walk ended on a node that needs completing


@dataclass(frozen=True)
class Lookup(Generic[V]):
    """Result of ``CompressedTrie.descend``.

    Attributes:
        status: How the descent ended.
        node: Node the descent ended on, None when not found.
        consumed: Key characters consumed by branch edges on the way to node.
            For a FOUND leaf the residue is not included.
    """
    status: LookupStatus
    node: Optional[Node[V]] = None
    consumed: str = ''

    @property
    def found(self) -> bool:
        return self.status is not LookupStatus.NOT_FOUND


NOT_FOUND: Lookup = Lookup(LookupStatus.NOT_FOUND)


class CompressedTrie(Generic[V]):
    """Space-compressed trie mapping string keys to values.

    Supports:
    - Insert a key with an optional value (existing keys are kept as-is)
    - Exact membership and value lookup
    - Deterministic prefix completion (smallest child character first)
    - Enumeration of every stored key

    Example:
        trie = CompressedTrie()
        trie.insert("cat", 1)
        trie.insert("cake", 2)

        trie.exists("cat")         # True
        trie.exists("ca")          # False
        trie.value_at("cake")      # (True, 2)
        trie.prefix_match("ca")    # (True, "cake")
    """

    def __init__(self):
        """Initialize an empty trie."""
        self._root: Branch[V] = Branch()
        self._size = 0

    @property
    def root(self) -> Branch[V]:
        """Root branch. Never a leaf and never carries a value."""
        return self._root

    def insert(self, key: str, value: Optional[V] = None) -> None:
        """Insert key with an associated value.

        An empty key is ignored. If key is already stored the tree is left
        untouched and the stored value is kept; use ``reset_value`` to
        replace it.

        Args:
            key: The key to insert.
            value: Value to associate with key.

        Raises:
            TypeError: If key is not a string.
        """
        if not isinstance(key, str):
            raise TypeError(f"Trie keys must be str, got {type(key).__name__}")
        if not key:
            return

        parent: Optional[Branch[V]] = None
        edge = ''
        node: Node[V] = self._root
        i = 0

        while True:
            kind = node_kind(node)

            if kind is NodeKind.LEAF:
                replacement = breakup_leaf(node, key[i:], value)
                if replacement is None:
                    logger.debug("Key %r already present, insert ignored", key)
                    return
                parent.children[edge] = replacement
                break

            if i == len(key):
                if kind is NodeKind.VALUE_BRANCH:
                    logger.debug("Key %r already present, insert ignored", key)
                    return
                # Retag: same children, now terminating a key
                parent.children[edge] = ValueBranch(children=node.children, value=value)
                break

            char = key[i]
            child = node.children.get(char)
            if child is None:
                node.children[char] = make_tail(key[i + 1:], value)
                break

            parent, edge, node = node, char, child
            i += 1

        self._size += 1

    def exists(self, key: str) -> bool:
        """Check if an exact key is stored.

        Args:
            key: The key to check.

        Returns:
            True if key was inserted. Always False for an empty key.
        """
        return self.descend(key).found

    def value_at(self, key: str) -> Tuple[bool, Optional[V]]:
        """Look up the value stored for an exact key.

        Args:
            key: The key to look up.

        Returns:
            (True, value) if key is stored, (False, None) otherwise.
        """
        lookup = self.descend(key)
        if not lookup.found:
            return False, None
        return True, lookup.node.value

    def reset_value(self, key: str, value: Optional[V]) -> bool:
        """Replace the value of a key that is already stored.

        Args:
            key: The key whose value to replace.
            value: New value.

        Returns:
            True if key was stored and its value replaced, False otherwise.
        """
        lookup = self.descend(key)
        if not lookup.found:
            return False
        lookup.node.value = value
        return True

    def prefix_match(self, prefix: str) -> Tuple[bool, str]:
        """Complete prefix to a stored key.

        Follows prefix down the trie. Where prefix runs out on a plain
        branch, keeps descending through the smallest child character
        until a key ends. The result is the lexicographically smallest
        stored key that starts with prefix.

        Args:
            prefix: The prefix to complete.

        Returns:
            (True, key) for the completion, (False, "") if no stored key
            starts with prefix or prefix is empty.
        """
        lookup = self.descend(prefix, partial=True)
        if lookup.status is LookupStatus.NOT_FOUND:
            return False, ''
        if lookup.status is LookupStatus.FOUND:
            return True, prefix
        return True, self._complete(lookup.node, lookup.consumed)

    def get_words(self) -> List[str]:
        """Return all stored keys.

        Order is unspecified. Each call walks the whole tree again.
        """
        words: List[str] = []
        stack: List[Tuple[Node[V], str]] = [(self._root, '')]
        while stack:
            node, path = stack.pop()
            kind = node_kind(node)
            if kind is NodeKind.LEAF:
                words.append(path + node.residue)
                continue
            if kind is NodeKind.VALUE_BRANCH:
                words.append(path)
            for char, child in node.children.items():
                stack.append((child, path + char))
        return words

    def node_count(self) -> int:
        """Return the number of nodes below the root."""
        count = 0
        stack: List[Node[V]] = [self._root]
        while stack:
            node = stack.pop()
            if node_kind(node) is not NodeKind.LEAF:
                count += len(node.children)
                stack.extend(node.children.values())
        return count

    def descend(self, key: str, partial: bool = False) -> Lookup[V]:
        """Walk key down the trie.

        Each branch hop consumes one character. A leaf ends the walk and is
        compared against the rest of key: for equality by default, or as a
        prefix of its residue when partial is set.

        Args:
            key: Key (or prefix, when partial) to follow.
            partial: Accept a walk that ends before a stored key does.

        Returns:
            FOUND with the terminating node when key is stored.
            FOUND_WITH_REMAINDER (partial only) when key ends on a plain
            branch or inside a leaf. NOT_FOUND otherwise, including for
            an empty key.
        """
        if not key:
            return NOT_FOUND

        node: Node[V] = self._root
        i = 0
        while True:
            kind = node_kind(node)

            if kind is NodeKind.LEAF:
                rest = key[i:]
                if node.residue == rest:
                    return Lookup(LookupStatus.FOUND, node, key[:i])
                if partial and node.residue.startswith(rest):
                    return Lookup(LookupStatus.FOUND_WITH_REMAINDER, node, key[:i])
                return NOT_FOUND

            if i == len(key):
                if kind is NodeKind.VALUE_BRANCH:
                    return Lookup(LookupStatus.FOUND, node, key)
                if partial:
                    return Lookup(LookupStatus.FOUND_WITH_REMAINDER, node, key)
                return NOT_FOUND

            child = node.children.get(key[i])
            if child is None:
                return NOT_FOUND
            node = child
            i += 1

    def _complete(self, node: Node[V], path: str) -> str:
        """Extend path from node to the first key reached via smallest children."""
        parts = [path]
        while True:
            kind = node_kind(node)
            if kind is NodeKind.VALUE_BRANCH:
                return ''.join(parts)
            if kind is NodeKind.LEAF:
                parts.append(node.residue)
                return ''.join(parts)
            assert node.children, "plain branch without children"
            char = min(node.children)
            parts.append(char)
            node = node.children[char]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_words())

    def __len__(self) -> int:
        """Return number of stored keys."""
        return self._size
