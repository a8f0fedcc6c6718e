"""Trained ID3 model: a dataset, its target column and the induced tree."""
from __future__ import annotations

import logging
from typing import Iterator, Mapping

from .dataset import Dataset
from .exceptions import ConfigurationError
from .tree import TreeBuilder, TreeNode, paths, predict, walk

logger = logging.getLogger(__name__)


class ID3Model:
    """Result of :func:`train`.  Read-only after construction."""

    __slots__ = ("_dataset", "_target", "_root")

    def __init__(self, dataset: Dataset, target: str, root: TreeNode):
        self._dataset = dataset
        self._target = target
        self._root = root

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def target(self) -> str:
        return self._target

    @property
    def root(self) -> TreeNode:
        return self._root

    @property
    def features(self) -> list[str]:
        return self._dataset.features(self._target)

    def predict(self, query: Mapping[str, str]) -> str:
        return predict(self._root, query)

    def walk(self) -> Iterator:
        return walk(self._root)

    def paths(self) -> Iterator:
        return paths(self._root)

    def depth(self) -> int:
        return self._root.depth()

    def n_leaves(self) -> int:
        return self._root.n_leaves()

    def __repr__(self):
        return (f"ID3Model(target={self._target!r}, rows={len(self._dataset)}, "
                f"leaves={self.n_leaves()}, depth={self.depth()})")


def train(dataset: Dataset, target: str) -> ID3Model:
    """
    Induce an ID3 tree predicting ``target`` from every other column.

    Parameters
    ----------
    dataset : Dataset
        Training table.
    target : str
        Name of the class column.

    Returns
    -------
    ID3Model

    Raises
    ------
    ConfigurationError
        If ``dataset`` has no rows or ``target`` is not one of its columns.
    """
    if len(dataset) == 0:
        raise ConfigurationError("no data loaded: the dataset has no rows")
    if target not in dataset:
        raise ConfigurationError(f"target column {target!r} not found")
    root = TreeBuilder(dataset, target).build()
    model = ID3Model(dataset, target, root)
    logger.info("Trained ID3 tree on %d rows (target=%r): %d leaves, depth %d",
                len(dataset), target, model.n_leaves(), model.depth())
    return model
