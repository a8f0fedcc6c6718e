# -*- coding: utf-8 -*-
"""
id3py.tree
==========

Tree structure, ID3 induction and inference.

A tree is made of two node kinds: :class:`Leaf`, which carries a predicted
class, and :class:`DecisionNode`, which carries the split feature and one
child per value of that feature observed in its partition.  Nodes are frozen;
each child belongs to exactly one parent.

:class:`TreeBuilder` grows a tree by picking, at every partition, the unused
feature with the largest information gain.  :func:`predict` walks the tree
for one query and returns :data:`UNKNOWN` when the query does not reach a
leaf.  :func:`walk` and :func:`paths` are the read-only traversals used by the
renderers in :mod:`id3py.export`.

Tie-breaking
------------
- Best feature: candidates are scanned in header order and only a strictly
  larger gain replaces the current best, so the first column wins ties.
- Majority class: the value seen first while scanning the partition's rows in
  index order wins ties.
- Children are stored in the order their value first appears in the
  partition.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence, Union

from .criterion import group_by, information_gain, is_pure, majority_class
from .dataset import Dataset

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Unknown sentinel
# -----------------------------------------------------------------------------
class _UnknownLabel(str):
    """Singleton string returned when a query cannot be classified."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls, "Unknown")
        return cls._instance

    def __repr__(self):
        return "UNKNOWN"

    def __reduce__(self):
        return (_UnknownLabel, ())


UNKNOWN = _UnknownLabel()


def is_unknown(value) -> bool:
    """True only for the :data:`UNKNOWN` sentinel, not for a class named "Unknown"."""
    return value is UNKNOWN


# -----------------------------------------------------------------------------
# Nodes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Leaf:
    """Terminal node holding a single predicted class."""

    prediction: str

    is_leaf = True

    def depth(self) -> int:
        return 0

    def n_leaves(self) -> int:
        return 1


@dataclass(frozen=True)
class DecisionNode:
    """Internal node splitting on ``feature``.

    ``children`` maps every value of ``feature`` seen in the node's partition
    to the subtree for that value.  It is exposed as a read-only mapping.
    """

    feature: str
    children: Mapping[str, "TreeNode"] = field(default_factory=dict)

    is_leaf = False

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def depth(self) -> int:
        return max(d for d, _, _ in walk(self))

    def n_leaves(self) -> int:
        return sum(1 for _, _, node in walk(self) if node.is_leaf)


TreeNode = Union[Leaf, DecisionNode]


# -----------------------------------------------------------------------------
# Induction
# -----------------------------------------------------------------------------
class TreeBuilder:
    """Recursive ID3 induction over an immutable :class:`Dataset`.

    Parameters
    ----------
    dataset : Dataset
        Training table.  Never modified.
    target : str
        Name of the class column.  Every other column is a candidate feature.
    """

    def __init__(self, dataset: Dataset, target: str):
        self.dataset = dataset
        self.target = target
        self.features = dataset.features(target)

    def build(self, indices: Sequence[int] | None = None,
              used: frozenset[str] = frozenset(), depth: int = 0) -> TreeNode:
        """
        Build the subtree for the rows in ``indices``.

        Parameters
        ----------
        indices : sequence of int, optional
            Rows of the partition.  Defaults to every row of the dataset.
        used : frozenset of str
            Features already split on between the root and this node.  Each
            child receives its own extended copy.
        depth : int, default=0
            Depth of the node, for logging.

        Returns
        -------
        TreeNode
            A :class:`Leaf` for empty, pure or exhausted partitions, otherwise
            a :class:`DecisionNode`.
        """
        if indices is None:
            indices = range(len(self.dataset))
        indices = list(indices)
        if not indices:
            return Leaf(UNKNOWN)
        if is_pure(self.dataset, indices, self.target):
            return Leaf(self.dataset.rows[indices[0]][self.dataset.column(self.target)])

        best, gain = self._best_feature(indices, used)
        if best is None:
            return Leaf(majority_class(self.dataset, indices, self.target))

        groups = group_by(self.dataset, indices, best)
        logger.debug("depth %d: split %d rows on %r (gain=%.4f) into %d branches",
                     depth, len(indices), best, gain, len(groups))
        child_used = used | {best}
        children = {value: self.build(group, child_used, depth + 1)
                    for value, group in groups.items()}
        return DecisionNode(best, children)

    def _best_feature(self, indices: list[int], used: frozenset[str]):
        best, best_gain = None, -1.0
        for feature in self.features:
            if feature in used:
                continue
            gain = information_gain(self.dataset, indices, feature, self.target)
            if gain > best_gain:
                best, best_gain = feature, gain
        return best, best_gain


# -----------------------------------------------------------------------------
# Inference
# -----------------------------------------------------------------------------
def predict(node: TreeNode, query: Mapping[str, str]) -> str:
    """Classify ``query`` (feature name -> value) with the tree rooted at ``node``.

    Returns :data:`UNKNOWN` if a feature needed on the path is absent from the
    query, or if its value has no branch at that node.  Only exact matches are
    followed.
    """
    while not node.is_leaf:
        if node.feature not in query:
            return UNKNOWN
        child = node.children.get(query[node.feature])
        if child is None:
            return UNKNOWN
        node = child
    return node.prediction


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------
def walk(node: TreeNode, depth: int = 0,
         branch: str | None = None) -> Iterator[tuple[int, str | None, TreeNode]]:
    """Yield ``(depth, branch_value, node)`` in pre-order.

    ``branch_value`` is the value of the parent's split feature that leads to
    ``node``; it is ``None`` for the root.
    """
    yield depth, branch, node
    if not node.is_leaf:
        for value, child in node.children.items():
            yield from walk(child, depth + 1, value)


def paths(node: TreeNode, conditions: tuple = ()) -> Iterator[tuple[tuple[tuple[str, str], ...], Leaf]]:
    """Yield ``(conditions, leaf)`` for every leaf below ``node``.

    ``conditions`` lists the ``(feature, value)`` tests from the root to the
    leaf.
    """
    if node.is_leaf:
        yield conditions, node
        return
    for value, child in node.children.items():
        yield from paths(child, conditions + ((node.feature, value),))
