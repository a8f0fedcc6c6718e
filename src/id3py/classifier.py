# -*- coding: utf-8 -*-
"""
id3py.classifier
================

scikit-learn style front end for ID3.  :class:`ID3Classifier` turns an
``(X, y)`` pair into a :class:`~id3py.dataset.Dataset`, trains an
:class:`~id3py.model.ID3Model` on it and exposes ``predict``/``score`` plus
the rule, text and Graphviz exports.

Every feature is categorical: cells are compared as strings, so ``1`` and
``"1"`` are the same category.  Class labels are returned as the objects
passed to ``fit``.  Rows that reach no leaf are predicted as
:data:`~id3py.tree.UNKNOWN`.
"""
from __future__ import annotations

import logging
from typing import Mapping

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from . import export
from .dataset import Dataset
from .exceptions import ConfigurationError, DataError, NotFittedError
from .model import train
from .tree import UNKNOWN

logger = logging.getLogger(__name__)


def _isnan_scalar(v) -> bool:
    return (v is None) or (isinstance(v, float) and np.isnan(v))


class ID3Classifier(ClassifierMixin, BaseEstimator):
    """
    ID3 decision tree classifier for categorical features.

    At every node the tree splits on the unused feature with the highest
    information gain and creates one branch per observed value.  Growth stops
    when a partition is pure or every feature has been used on the path, in
    which case the majority class is predicted.

    Parameters
    ----------
    feature_names : list[str] or None, default=None
        Names of the columns of ``X``.  If omitted, DataFrame column names are
        used when available, otherwise ``f0, f1, ...``.
    target_name : str, default="target"
        Name given to the class column in the internal dataset.  Must differ
        from every feature name.

    Attributes
    ----------
    model_ : ID3Model
        Trained model.
    tree_ : TreeNode
        Root of the induced tree.
    classes_ : ndarray
        Class labels seen during ``fit``.
    feature_names_ : list[str]
        Feature names used for training and queries.
    n_features_in_ : int
        Number of columns of ``X`` seen during ``fit``.

    Notes
    -----
    Missing values are not supported during ``fit``.  At prediction time a
    ``None`` or NaN cell means the feature is not given; if the tree needs it the
    row is predicted as ``UNKNOWN``.
    """

    def __init__(self, *, feature_names: list[str] | None = None,
                 target_name: str = "target"):
        self.feature_names = feature_names
        self.target_name = target_name

    def fit(self, X, y, feature_names=None):
        names = feature_names if feature_names is not None else self.feature_names
        if names is None and hasattr(X, "columns"):
            names = [str(c) for c in X.columns]
        X = np.asarray(X, dtype=object)
        y = np.asarray(y)
        if len(y) == 0:
            raise ConfigurationError("no data loaded: y is empty")
        if X.ndim != 2:
            raise ConfigurationError(f"X must be 2-dimensional, got shape {X.shape}")
        if len(X) != len(y):
            raise ConfigurationError("X and y must have the same number of rows")

        n_features = X.shape[1]
        if names is None:
            names = [f"f{i}" for i in range(n_features)]
        if len(names) != n_features:
            raise ConfigurationError("feature_names length must match X.shape[1]")
        names = [str(n) for n in names]
        if self.target_name in names:
            raise ConfigurationError(
                f"target_name {self.target_name!r} clashes with a feature name")
        if any(_isnan_scalar(v) for v in X.ravel()) or any(_isnan_scalar(v) for v in y):
            raise DataError("missing values are not supported")

        dataset = Dataset(tuple(names) + (self.target_name,),
                          tuple(tuple(row) + (label,) for row, label in zip(X, y)))
        self.model_ = train(dataset, self.target_name)
        self.tree_ = self.model_.root
        self.feature_names_ = names
        self.n_features_in_ = n_features
        self.classes_ = np.unique(y)
        # predictions come back as strings; map them to the labels given to fit
        self._labels = {str(label): label for label in y.tolist()}
        logger.debug("fit: %d samples, %d features, %d classes",
                     len(y), n_features, len(self.classes_))
        return self

    def _check_fitted(self):
        if getattr(self, "model_", None) is None:
            raise NotFittedError("Estimator not fitted. Call fit(...) first.")

    def _query(self, row) -> dict[str, str]:
        return {name: str(v) for name, v in zip(self.feature_names_, row)
                if not _isnan_scalar(v)}

    def _label(self, prediction: str):
        if prediction is UNKNOWN:
            return UNKNOWN
        return self._labels.get(prediction, prediction)

    def predict(self, X):
        """
        Predict class labels for the provided samples.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Input samples, columns in the order seen by ``fit``.  ``None``/NaN
            cells are treated as absent features.

        Returns
        -------
        ndarray of shape (n_samples,), dtype=object
            Predicted labels, or ``UNKNOWN`` for rows whose value path was not
            seen in training.

        Raises
        ------
        NotFittedError
            If the estimator has not been fitted.
        """
        self._check_fitted()
        X = np.asarray(X, dtype=object)
        if X.ndim != 2 or X.shape[1] != self.n_features_in_:
            raise ConfigurationError(
                f"X has shape {X.shape}, expected (n_samples, {self.n_features_in_})")
        out = np.empty(len(X), dtype=object)
        for i, row in enumerate(X):
            out[i] = self._label(self.model_.predict(self._query(row)))
        return out

    def predict_one(self, query: Mapping[str, object]):
        """Classify a single ``{feature: value}`` mapping; features may be omitted."""
        self._check_fitted()
        q = {str(k): str(v) for k, v in query.items() if not _isnan_scalar(v)}
        return self._label(self.model_.predict(q))

    def score(self, X, y, sample_weight=None):
        """Accuracy on ``(X, y)``; ``UNKNOWN`` predictions count as errors."""
        pred = self.predict(X)
        hits = np.array([p is not UNKNOWN and p == t for p, t in zip(pred, np.asarray(y).tolist())],
                        dtype=float)
        return float(np.average(hits, weights=sample_weight))

    def get_depth(self) -> int:
        self._check_fitted()
        return self.model_.depth()

    def get_n_leaves(self) -> int:
        self._check_fitted()
        return self.model_.n_leaves()

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------
    def export_rules(self) -> list[str]:
        """All decision rules, one ``"<antecedent> => <class>"`` per leaf."""
        self._check_fitted()
        return export.export_rules(self.tree_)

    def export_text(self) -> str:
        self._check_fitted()
        return export.export_text(self.tree_)

    def print_tree(self):
        """Pretty-print the decision tree to ``stdout``."""
        print(self.export_text())

    def export_graphviz(self, filename: str | None = None, *, format: str = "dot") -> str:
        """See :func:`id3py.export.export_graphviz`."""
        self._check_fitted()
        return export.export_graphviz(self.tree_, filename, format=format)
