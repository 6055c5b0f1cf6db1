"""
.. currentmodule:: skmoebius.constants

========================================
constants (:mod:`skmoebius.constants`)
========================================

This module contains the numerical approximations used as default
tolerances throughout skmoebius.

.. data:: ALMOST_ZERO

    Norm below which an algebra element is treated as zero (1e-12)

.. data:: RTOL

    Default relative tolerance of approximate comparisons (1e-9)

"""
from __future__ import annotations

from numbers import Number
from typing import Sequence, Union

import numpy as np

__all__ = ['ALMOST_ZERO', 'RTOL', 'NumberLike']

# used as substitutes to handle mathematical singularities.
ALMOST_ZERO = 1e-12
"""
Very tiny but not zero value to handle mathematical singularities.
"""

RTOL = 1e-9
"""
Relative tolerance, used for numerical comparisons.
"""

NumberLike = Union[Number, Sequence[Number], np.ndarray]
