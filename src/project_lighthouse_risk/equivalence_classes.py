"""
Equivalence classes of a dataset with respect to a set of quasi-identifiers.

An equivalence class is a maximal group of records sharing identical values on
the chosen quasi-identifiers (QIDs). All risk models in this package consume the
distribution of equivalence class sizes rather than the records themselves.
"""

import logging
from collections.abc import Hashable, Mapping, Sequence
from types import MappingProxyType
from typing import Optional

import numpy as np
import pandas as pd

from project_lighthouse_risk.cancellation import CancellationToken
from project_lighthouse_risk.utils import class_size_summary

_LOGGER = logging.getLogger(__name__)


class EquivalenceClasses:
    """
    Immutable summary of the partition of a dataset into equivalence classes.

    Construction groups the dataframe by the QIDs, missing values included, and
    keeps the resulting class sizes. The input dataframe is never modified.

    Parameters
    ----------
    handle : pd.DataFrame
        The released dataset.
    qids : Optional[Sequence[Hashable]]
        Quasi-identifier column labels. If None, all columns are treated as QIDs.
        If empty, the whole dataset forms a single equivalence class.
    token : CancellationToken
        Token polled before and after grouping.
    logger : Optional[logging.Logger], default=None
        Logger for recording the computation, defaults to this module's logger.

    Raises
    ------
    ValueError
        If handle has no rows or any QID is not a column of handle.
    ComputationInterruptedError
        If cancellation was requested on token.
    """

    def __init__(
        self,
        handle: pd.DataFrame,
        qids: Optional[Sequence[Hashable]],
        token: CancellationToken,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        logger = logger if logger is not None else _LOGGER
        token.raise_if_requested()

        if len(handle) == 0:
            raise ValueError("Input dataframe has no rows")
        qids = tuple(handle.columns) if qids is None else tuple(qids)
        for qid_col in qids:
            if qid_col not in handle.columns:
                raise ValueError(f"QID col ({qid_col}) is not a column in the input dataframe")

        logger.debug("Computing equivalence classes for %d records on %s", len(handle), qids)
        if len(qids) > 0:
            sizes = handle.groupby(list(qids), dropna=False, sort=False, observed=True).size()
            class_sizes = sizes.to_numpy(dtype=np.int64)
        else:
            class_sizes = np.array([len(handle)], dtype=np.int64)
        token.raise_if_requested()

        self._init_from_class_sizes(qids, class_sizes)
        logger.debug("Found %d equivalence classes on %s", self.num_classes, qids)

    @classmethod
    def from_class_sizes(
        cls, qids: Sequence[Hashable], class_sizes: Sequence[int]
    ) -> "EquivalenceClasses":
        """
        Create equivalence classes from already known class sizes.

        Parameters
        ----------
        qids : Sequence[Hashable]
            Quasi-identifier column labels the sizes were computed over.
        class_sizes : Sequence[int]
            Size of each equivalence class, all of them positive.

        Returns
        -------
        EquivalenceClasses
            The partition summary.

        Raises
        ------
        ValueError
            If class_sizes is empty or contains a size smaller than 1.
        """
        sizes = np.asarray(class_sizes, dtype=np.int64)
        if len(sizes) == 0:
            raise ValueError("At least one equivalence class is required")
        if int(sizes.min()) < 1:
            raise ValueError("Equivalence class sizes must be >= 1")
        instance = cls.__new__(cls)
        instance._init_from_class_sizes(tuple(qids), sizes)
        return instance

    def _init_from_class_sizes(self, qids: tuple[Hashable, ...], class_sizes: np.ndarray) -> None:
        class_sizes = class_sizes.copy()
        class_sizes.setflags(write=False)
        self._qids = qids
        self._class_sizes = class_sizes
        minimum, maximum, uniques = class_size_summary(class_sizes)
        self._min_class_size = int(minimum)
        self._max_class_size = int(maximum)
        self._num_unique_records = int(uniques)
        self._num_records = int(class_sizes.sum())
        sizes, counts = np.unique(class_sizes, return_counts=True)
        self._size_to_count = MappingProxyType(
            {int(size): int(count) for size, count in zip(sizes, counts)}
        )

    @property
    def qids(self) -> tuple[Hashable, ...]:
        return self._qids

    @property
    def class_sizes(self) -> np.ndarray:
        """Read-only array with the size of every equivalence class."""
        return self._class_sizes

    @property
    def size_to_count(self) -> Mapping[int, int]:
        """Read-only mapping from class size to the number of classes of that size."""
        return self._size_to_count

    @property
    def num_records(self) -> int:
        return self._num_records

    @property
    def num_classes(self) -> int:
        return len(self._class_sizes)

    @property
    def min_class_size(self) -> int:
        return self._min_class_size

    @property
    def max_class_size(self) -> int:
        return self._max_class_size

    @property
    def num_unique_records(self) -> int:
        """Number of records that are alone in their equivalence class."""
        return self._num_unique_records

    @property
    def average_class_size(self) -> float:
        return self._num_records / self.num_classes

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(qids={self._qids}, "
            f"num_records={self._num_records}, num_classes={self.num_classes})"
        )
