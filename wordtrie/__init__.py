"""In-memory string indexes built on tries.

- CompressedTrie: radix-style trie, single-child chains stored as leaves
- ReferenceTrie: one node per character, used as a correctness baseline
- SetIndex: plain dict with the same operations, used as an oracle

Example:
    from wordtrie import CompressedTrie

    trie = CompressedTrie()
    trie.insert("bat", 1)
    trie.insert("bake", 2)

    trie.exists("bat")          # True
    trie.value_at("bake")       # (True, 2)
    trie.prefix_match("ba")     # (True, "bake")
    sorted(trie.get_words())    # ["bake", "bat"]
"""

from .protocols import NodeKind, WordIndex
from .nodes import Branch, ValueBranch, Leaf, Node, node_kind, make_tail
from .split import breakup_leaf
from .compressed import CompressedTrie, Lookup, LookupStatus
from .reference import ReferenceTrie, TrieNode
from .oracles import SetIndex
from .loader import (
    SeedConfig,
    SeedParseError,
    parse_seed_file,
    parse_seed_string,
    build_trie,
    load_trie,
)

__all__ = [
    # Protocols and enums
    'NodeKind',
    'WordIndex',
    # Node kinds
    'Branch',
    'ValueBranch',
    'Leaf',
    'Node',
    'node_kind',
    'make_tail',
    'breakup_leaf',
    # Indexes
    'CompressedTrie',
    'Lookup',
    'LookupStatus',
    'ReferenceTrie',
    'TrieNode',
    'SetIndex',
    # Seed files
    'SeedConfig',
    'SeedParseError',
    'parse_seed_file',
    'parse_seed_string',
    'build_trie',
    'load_trie',
]
