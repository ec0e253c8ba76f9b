"""Uncompressed reference trie.

One node per character, no path compression. Slow and memory hungry, but
simple enough to trust: the test suite checks the compressed trie against
it, and it serves as a baseline when comparing the two.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')


@dataclass
class TrieNode(Generic[T]):
    """Node in the reference trie.

    Attributes:
        children: Child nodes keyed by character.
        value: Associated value if this node is a terminal.
        is_terminal: Whether this node ends a stored key.
    """
    children: Dict[str, 'TrieNode[T]'] = field(default_factory=dict)
    value: Optional[T] = None
    is_terminal: bool = False


class ReferenceTrie(Generic[T]):
    """Character-per-node trie with the same contract as CompressedTrie.

    Example:
        trie = ReferenceTrie()
        trie.insert("bat")
        trie.insert("bake")

        trie.exists("bat")          # True
        trie.prefix_match("ba")     # (True, "bake")
    """

    def __init__(self):
        self._root: TrieNode[T] = TrieNode()
        self._size = 0

    def insert(self, key: str, value: Optional[T] = None) -> None:
        """Insert key with associated value.

        Empty keys are ignored and an existing key keeps its value.

        Args:
            key: The key to insert.
            value: Value to associate with key.
        """
        if not key:
            return
        node = self._root
        for char in key:
            if char not in node.children:
                node.children[char] = TrieNode()
            node = node.children[char]
        if node.is_terminal:
            return
        node.value = value
        node.is_terminal = True
        self._size += 1

    def exists(self, key: str) -> bool:
        """Check if an exact key is stored."""
        node = self._find_node(key)
        return node is not None and node.is_terminal

    def value_at(self, key: str) -> Tuple[bool, Optional[T]]:
        """Return (found, value) for an exact key."""
        node = self._find_node(key)
        if node is None or not node.is_terminal:
            return False, None
        return True, node.value

    def prefix_match(self, prefix: str) -> Tuple[bool, str]:
        """Complete prefix by following the smallest child character.

        Args:
            prefix: The prefix to complete.

        Returns:
            (True, key) for the first key reached, (False, "") if no key
            starts with prefix.
        """
        node = self._find_node(prefix)
        if node is None:
            return False, ''

        match = [prefix]
        while not node.is_terminal:
            assert node.children, "non-terminal node without children"
            char = min(node.children)
            match.append(char)
            node = node.children[char]
        return True, ''.join(match)

    def get_words(self) -> List[str]:
        """Return all stored keys, in character order."""
        words: List[str] = []
        self._collect(self._root, [], words)
        return words

    def _collect(self, node: TrieNode[T], path: List[str], words: List[str]) -> None:
        if node.is_terminal:
            words.append(''.join(path))
        for char in sorted(node.children):
            path.append(char)
            self._collect(node.children[char], path, words)
            path.pop()

    def _find_node(self, key: str) -> Optional[TrieNode[T]]:
        """Walk key from the root, returning the node reached or None.

        An empty key never reaches a node.
        """
        if not key:
            return None
        node = self._root
        for char in key:
            if char not in node.children:
                return None
            node = node.children[char]
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __len__(self) -> int:
        return self._size
