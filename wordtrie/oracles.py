"""Dictionary-backed word index.

SetIndex answers the same questions as the tries with a plain dict and
linear scans. It is the unordered-map oracle used to cross-check the trie
implementations on randomly generated key sets.
"""

from typing import Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class SetIndex(Generic[T]):
    """O(1) exact lookup, O(n) prefix completion.

    Follows the trie semantics exactly: empty keys are never stored and
    re-inserting a key keeps its first value.
    """

    def __init__(self):
        self._by_key: Dict[str, Optional[T]] = {}

    def insert(self, key: str, value: Optional[T] = None) -> None:
        """Register key with its value unless already present."""
        if key:
            self._by_key.setdefault(key, value)

    def exists(self, key: str) -> bool:
        return key in self._by_key

    def value_at(self, key: str) -> Tuple[bool, Optional[T]]:
        if key in self._by_key:
            return True, self._by_key[key]
        return False, None

    def prefix_match(self, prefix: str) -> Tuple[bool, str]:
        """Return the smallest stored key starting with prefix.

        This is the key a trie reaches by always taking the smallest
        child character, since a key sorts before its own extensions.
        """
        if not prefix:
            return False, ''
        candidates = [key for key in self._by_key if key.startswith(prefix)]
        if not candidates:
            return False, ''
        return True, min(candidates)

    def get_words(self) -> List[str]:
        return list(self._by_key)

    def __len__(self) -> int:
        """Return number of registered keys."""
        return len(self._by_key)
