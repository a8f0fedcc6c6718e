# id3py/__init__.py
"""
id3py: ID3 decision trees for categorical data (scikit-learn style).

Exports:
    - ID3Classifier
    - Dataset, read_csv
    - train, ID3Model
    - UNKNOWN, is_unknown
"""
from .classifier import ID3Classifier
from .dataset import Dataset, read_csv
from .exceptions import ConfigurationError, DataError, ID3Error, NotFittedError
from .model import ID3Model, train
from .tree import UNKNOWN, DecisionNode, Leaf, is_unknown

__all__ = [
    "ID3Classifier",
    "Dataset",
    "read_csv",
    "ID3Model",
    "train",
    "Leaf",
    "DecisionNode",
    "UNKNOWN",
    "is_unknown",
    "ID3Error",
    "ConfigurationError",
    "DataError",
    "NotFittedError",
]
__version__ = "0.1.0"
