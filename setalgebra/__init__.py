"""Generic in-memory mathematical sets, with their relations, algebra, Cartesian products and power sets"""

# Add imports here
from .sets import *

from ._version import __version__
