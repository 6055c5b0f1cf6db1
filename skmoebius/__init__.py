"""
skmoebius provides Moebius transforms over real, complex and
hypercomplex algebras, implemented in Python.
"""

__version__ = '0.1.0'
## Import all  module names for coherent reference of name-space

from . import (
    algebra,
    constants,
    transform,
)
from .algebra import *
from .constants import *

# Import contents into current namespace for ease of calling
from .transform import *

## Shorthand Names
M = Moebius
