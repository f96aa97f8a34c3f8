'''General-purpose Protocols shared across set implementations'''

from .copyable import Copyable
from .comparison import SetRelatable
