'''Set containers, the relations and algebra between them, and constructions derived from them'''

from .interface import Set, SetError, IncompatibleSetError
from .hashset import HashSet
from .pair import Pair
from .constructions import cartesian_product, power_set
