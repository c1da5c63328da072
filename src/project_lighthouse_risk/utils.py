"""
Numerical helpers shared by the risk models.
"""

import numba
import numpy as np


@numba.jit(nopython=True)
def class_size_summary(class_sizes: np.ndarray) -> tuple[int, int, int]:
    """
    Find the smallest and largest class size and count size-one classes.

    The array is traversed once, which is cheaper than separate min, max and
    count operations for datasets with many equivalence classes.

    Parameters
    ----------
    class_sizes : np.ndarray
        Non-empty integer array of equivalence class sizes.

    Returns
    -------
    Tuple[int, int, int]
        A tuple containing (minimum size, maximum size, number of classes of size 1).

    Examples
    --------
    >>> class_size_summary(np.array([3, 1, 2, 1]))
    (1, 3, 2)
    """
    minimum = class_sizes[0]
    maximum = class_sizes[0]
    uniques = 0
    for size in class_sizes:
        if size > maximum:
            maximum = size
        elif size < minimum:
            minimum = size
        if size == 1:
            uniques += 1
    return (minimum, maximum, uniques)
