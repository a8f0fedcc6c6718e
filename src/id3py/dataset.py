# -*- coding: utf-8 -*-
"""
id3py.dataset
=============

An immutable, in-memory table of categorical observations.  The tree builder
never copies or edits cells: partitions are plain lists of row indices into a
single :class:`Dataset`.

:func:`read_csv` is the loader used by the command line program.  It reads a
delimited file with a header row through pandas, keeps every cell as a string
and trims surrounding spaces and tabs.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator

import pandas as pd

from .exceptions import DataError

logger = logging.getLogger(__name__)

_WHITESPACE = " \t"


@dataclass(frozen=True)
class Dataset:
    """Column names plus rows of string values aligned with them.

    Parameters
    ----------
    headers : sequence of str
        Ordered column names.  The target column is one of them.
    rows : sequence of sequence of str
        Observations.  Each row must have exactly ``len(headers)`` values.

    Raises
    ------
    DataError
        If a header is repeated or a row does not match the header width.
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self):
        headers = tuple(str(h) for h in self.headers)
        if len(set(headers)) != len(headers):
            dupes = sorted({h for h in headers if headers.count(h) > 1})
            raise DataError(f"duplicate column names: {dupes}")
        rows = []
        for i, row in enumerate(self.rows):
            row = tuple(str(v) for v in row)
            if len(row) != len(headers):
                raise DataError(
                    f"row {i} has {len(row)} values, expected {len(headers)}"
                )
            rows.append(row)
        object.__setattr__(self, "headers", headers)
        object.__setattr__(self, "rows", tuple(rows))
        object.__setattr__(self, "_index", {h: i for i, h in enumerate(headers)})

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "Dataset":
        """Build a dataset from a DataFrame, converting every cell to ``str``."""
        if frame.isna().to_numpy().any():
            raise DataError("missing values are not supported")
        rows = [tuple(str(v) for v in r)
                for r in frame.itertuples(index=False, name=None)]
        return cls(tuple(str(c) for c in frame.columns), tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_columns(self) -> int:
        return len(self.headers)

    def __contains__(self, name) -> bool:
        return name in self._index

    def column(self, name: str) -> int:
        """Return the position of column ``name``; ``KeyError`` if absent."""
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"unknown column {name!r}") from None

    def values(self, column: int, indices: Iterable[int]) -> Iterator[str]:
        """Yield the values of ``column`` for the given row indices."""
        rows = self.rows
        for i in indices:
            yield rows[i][column]

    def features(self, target: str) -> list[str]:
        """Every column except ``target``, in header order."""
        return [h for h in self.headers if h != target]


def _strip(frame: pd.DataFrame) -> pd.DataFrame:
    if frame.empty:
        return frame
    return frame.apply(lambda col: col.str.strip(_WHITESPACE))


def read_csv(path: str | os.PathLike, *, delimiter: str = ",") -> Dataset:
    """Load a delimited text file whose first line holds the column names.

    All values are read as categorical strings; ``NA``-like tokens and empty
    fields are kept verbatim.  A file with a header but no data rows gives an
    empty dataset.

    Raises
    ------
    DataError
        If the file cannot be read, has no header line, or contains a row
        with more or fewer values than the header.
    """
    name = os.fspath(path)
    # header=None: the header line fixes the field count, so longer rows fail
    # to parse and shorter rows come back padded with NaN
    try:
        raw = pd.read_csv(path, sep=delimiter, header=None, dtype=str,
                          keep_default_na=False)
    except FileNotFoundError:
        raise DataError(f"cannot open file {name!r}") from None
    except pd.errors.EmptyDataError:
        raise DataError(f"no header row in {name!r}") from None
    except pd.errors.ParserError as exc:
        raise DataError(f"malformed file {name!r}: {exc}") from exc

    body = raw.iloc[1:]
    short = body.isna().any(axis=1).to_numpy()
    if short.any():
        first = int(short.argmax()) + 1
        raise DataError(f"row {first} of {name!r} has fewer values than the header")
    headers = [str(h).strip(_WHITESPACE) for h in raw.iloc[0]]
    if len(set(headers)) != len(headers):
        raise DataError(f"duplicate column names in {name!r}: {headers}")
    frame = body.set_axis(headers, axis=1).reset_index(drop=True)
    dataset = Dataset.from_frame(_strip(frame))
    logger.info("Loaded %d rows x %d columns from %s",
                dataset.n_rows, dataset.n_columns, name)
    return dataset
