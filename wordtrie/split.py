"""Leaf splitting for the compressed trie.

When an insertion walks into a Leaf, the leaf's residue and the remaining
input share some prefix and then diverge (or one of them ends). The leaf is
replaced by a small subtree: a chain of branches for the shared part, with
the old key and the new key hung below it.

Everything here builds new nodes and returns them. The caller installs the
result in the parent's child slot, so a tree is never seen half-split.
"""

from typing import Optional, Tuple, TypeVar

from .nodes import Branch, Leaf, Node, ValueBranch, make_tail

V = TypeVar('V')


def common_prefix_length(a: str, b: str) -> int:
    """Return the number of leading characters a and b share."""
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return i


def build_branches(chars: str) -> Tuple[Branch[V], Branch[V]]:
    """Build a chain of plain branches, one per character.

    Args:
        chars: Characters to consume along the chain.

    Returns:
        (top, bottom) of the chain. For an empty string both are the
        same single branch.
    """
    top: Branch[V] = Branch()
    bottom = top
    for char in chars:
        child: Branch[V] = Branch()
        bottom.children[char] = child
        bottom = child
    return top, bottom


def build_branches_to_value(chars: str, value: Optional[V]) -> Tuple[Branch[V], ValueBranch[V]]:
    """Build a chain of branches that ends in a ValueBranch.

    Args:
        chars: Characters to consume along the chain.
        value: Value for the key terminating at the bottom of the chain.

    Returns:
        (top, bottom) of the chain, bottom being the ValueBranch. For an
        empty string both are the same ValueBranch.
    """
    if not chars:
        node: ValueBranch[V] = ValueBranch(value=value)
        return node, node

    top, bottom = build_branches(chars[:-1])
    terminal: ValueBranch[V] = ValueBranch(value=value)
    bottom.children[chars[-1]] = terminal
    return top, terminal


def breakup_leaf(leaf: Leaf[V], remainder: str, value: Optional[V]) -> Optional['Node[V]']:
    """Build the subtree that replaces leaf after inserting remainder.

    Args:
        leaf: Leaf reached by the insertion.
        remainder: Unconsumed input at the leaf, aligned with its residue.
        value: Value for the key being inserted.

    Returns:
        Replacement node for the leaf's slot, or None when remainder
        equals the residue and the tree must stay as it is.
    """
    residue = leaf.residue
    shared = common_prefix_length(residue, remainder)
    residue_done = shared == len(residue)
    input_done = shared == len(remainder)

    if residue_done and input_done:
        return None

    if residue_done:
        top, terminal = build_branches_to_value(residue, leaf.value)
        terminal.children[remainder[shared]] = make_tail(remainder[shared + 1:], value)
        return top

    if input_done:
        top, terminal = build_branches_to_value(remainder, value)
        terminal.children[residue[shared]] = make_tail(residue[shared + 1:], leaf.value)
        return top

    # Diverge at residue[shared] != remainder[shared]
    top, fork = build_branches(residue[:shared])
    fork.children[residue[shared]] = make_tail(residue[shared + 1:], leaf.value)
    fork.children[remainder[shared]] = make_tail(remainder[shared + 1:], value)
    return top
