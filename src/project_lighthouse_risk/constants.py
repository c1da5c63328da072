"""
Shared constants for Project Lighthouse disclosure risk estimation.

This module defines constants used across the risk estimation components
for consistency in operations like equality comparisons of risk values.
"""

import math

# Used to determine equality of floats in Lighthouse
MAXIMUM_PRECISION_DIGITS: int = 8
EPSILON: float = math.pow(10, -MAXIMUM_PRECISION_DIGITS)
