"""
Tests for utils
"""

import numpy as np

from project_lighthouse_risk.utils import class_size_summary


class TestClassSizeSummary:
    """
    Tests for class_size_summary.
    """

    # pylint: disable=missing-function-docstring,no-self-use

    def test_mixed_sizes(self):
        assert class_size_summary(np.array([3, 1, 2, 1], dtype=np.int64)) == (1, 3, 2)

    def test_single_class(self):
        assert class_size_summary(np.array([5], dtype=np.int64)) == (5, 5, 0)

    def test_all_unique(self):
        assert class_size_summary(np.array([1, 1, 1], dtype=np.int64)) == (1, 1, 3)

    def test_decreasing_sizes(self):
        assert class_size_summary(np.array([9, 4, 2], dtype=np.int64)) == (2, 9, 0)

    def test_read_only_input(self):
        sizes = np.array([2, 1, 4], dtype=np.int64)
        sizes.setflags(write=False)
        assert class_size_summary(sizes) == (1, 4, 1)
