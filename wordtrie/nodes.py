"""Node kinds of the compressed trie.

A compressed trie is built from three node kinds:

- Branch: consumes one character per child edge, carries no value.
- ValueBranch: a Branch whose path is also a complete key.
- Leaf: stores the rest of a single key verbatim, plus its value.

The set is closed. Code that switches on node kind goes through
``node_kind`` (or an equivalent isinstance chain) and treats anything else
as a broken tree.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, Optional, TypeVar, Union

from .protocols import NodeKind

V = TypeVar('V')


@dataclass
class Branch(Generic[V]):
    """Fan-out point of the trie.

    Attributes:
        children: Child nodes keyed by the single character consumed
            to reach them.
    """
    children: Dict[str, 'Node[V]'] = field(default_factory=dict)


@dataclass
class ValueBranch(Branch[V]):
    """Branch that also terminates a stored key.

    Attributes:
        value: Value attached to the key ending at this node.
    """
    value: Optional[V] = None


@dataclass
class Leaf(Generic[V]):
    """Terminal node holding the remaining suffix of one key.

    Attributes:
        residue: Key characters after the edge character leading here.
            Never empty.
        value: Value attached to the key.
    """
    residue: str
    value: Optional[V] = None

    def __post_init__(self):
        assert self.residue, "leaf residue must not be empty"


Node = Union[Branch[V], ValueBranch[V], Leaf[V]]


def node_kind(node: 'Node[V]') -> NodeKind:
    """Return the kind tag of a node.

    ValueBranch is checked before Branch since it is a subclass.

    Raises:
        AssertionError: If node is not one of the three node kinds.
    """
    if isinstance(node, ValueBranch):
        return NodeKind.VALUE_BRANCH
    if isinstance(node, Branch):
        return NodeKind.BRANCH
    if isinstance(node, Leaf):
        return NodeKind.LEAF
    raise AssertionError(f"Unknown trie node: {node!r}")


def make_tail(remainder: str, value: Optional[V]) -> 'Node[V]':
    """Build the node that stores the rest of a key below an edge.

    A non-empty remainder becomes a Leaf. An empty one means the key ends
    exactly at the edge, which is a childless ValueBranch.
    """
    if remainder:
        return Leaf(remainder, value)
    return ValueBranch(value=value)
