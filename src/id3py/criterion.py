# -*- coding: utf-8 -*-
"""
id3py.criterion
===============

Information-theoretic splitting criterion used by ID3.  Every function works
on a subset of rows given as a list of indices into a :class:`~id3py.dataset.Dataset`;
nothing here copies the data.
"""
from __future__ import annotations

from collections import Counter
from typing import Sequence

import numpy as np

from .dataset import Dataset


def _entropy(counts: np.ndarray) -> float:
    tot = counts.sum()
    if tot <= 0:
        return 0.0
    p = counts / tot
    p = p[p > 0]
    return max(0.0, float(-np.sum(p * np.log2(p))))


def class_counts(dataset: Dataset, indices: Sequence[int], target: str) -> Counter:
    """Target value -> row count, in first-seen order."""
    return Counter(dataset.values(dataset.column(target), indices))


def group_by(dataset: Dataset, indices: Sequence[int], column: str) -> dict[str, list[int]]:
    """Partition ``indices`` by the value each row has in ``column``.

    Groups are ordered by the first appearance of their value while scanning
    ``indices``, and every group is non-empty.
    """
    col = dataset.column(column)
    rows = dataset.rows
    groups: dict[str, list[int]] = {}
    for i in indices:
        groups.setdefault(rows[i][col], []).append(i)
    return groups


def entropy(dataset: Dataset, indices: Sequence[int], target: str) -> float:
    """Shannon entropy (base 2) of the target distribution over ``indices``.

    An empty index set has entropy 0.
    """
    if len(indices) == 0:
        return 0.0
    counts = class_counts(dataset, indices, target)
    return _entropy(np.fromiter(counts.values(), dtype=float, count=len(counts)))


def information_gain(dataset: Dataset, indices: Sequence[int], feature: str,
                     target: str) -> float:
    """
    Reduction in target entropy obtained by splitting ``indices`` on ``feature``.

    Parameters
    ----------
    dataset : Dataset
        Table the indices refer to.
    indices : sequence of int
        Rows of the partition being evaluated.
    feature : str
        Candidate split column.
    target : str
        Class column.

    Returns
    -------
    float
        ``H(indices) - sum(|g| / |indices| * H(g))`` over the groups of
        ``indices`` keyed by ``feature``.  Never negative; 0 when the feature
        does not change the class distribution (e.g. a constant column).
    """
    total = len(indices)
    if total == 0:
        return 0.0
    parent = entropy(dataset, indices, target)
    weighted = 0.0
    for group in group_by(dataset, indices, feature).values():
        weighted += len(group) / total * entropy(dataset, group, target)
    return max(0.0, parent - weighted)


def majority_class(dataset: Dataset, indices: Sequence[int], target: str) -> str:
    """Most frequent target value among ``indices``.

    Ties go to the value encountered first while scanning ``indices`` in
    order.
    """
    counts = class_counts(dataset, indices, target)
    return max(counts, key=counts.get)


def is_pure(dataset: Dataset, indices: Sequence[int], target: str) -> bool:
    """True if every row in ``indices`` has the same target value."""
    col = dataset.column(target)
    rows = dataset.rows
    first = rows[indices[0]][col]
    return all(rows[i][col] == first for i in indices)
