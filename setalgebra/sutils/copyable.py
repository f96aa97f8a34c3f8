'''Generic Protocols for copyable objects'''

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Copyable(Protocol):
    '''
    Any class which supports creating a copy of instances of the class

    Copies must not share mutable storage with the original, i.e. mutating
    the copy after creation should never be observable through the original (or vice-versa)
    '''
    def copy(self) -> Self:
        ...
