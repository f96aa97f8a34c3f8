'''Abstract contract which all set implementations fulfill, and the errors raised when that contract is broken'''

from typing import (
    Hashable,
    Iterator,
    Protocol,
    Self,
    TypeVar,
    runtime_checkable,
)

from ..sutils.comparison import SetRelatable
from ..sutils.copyable import Copyable


T = TypeVar('T', bound=Hashable)

# Custom Exceptions
class SetError(Exception):
    '''Base class for errors raised by set operations'''
    pass

class IncompatibleSetError(SetError, TypeError):
    '''
    Raised when a set is combined with or compared to an object which is not
    the same concrete set implementation (and therefore does not share its internal representation)
    '''
    pass

# Set contract proper
@runtime_checkable
class Set(SetRelatable, Copyable, Protocol[T]):
    '''
    An unordered collection of unique, arbitrary (hashable) elements,
    supporting the usual relations and algebra of mathematical sets

    Binary operations are only defined between two instances of the same concrete implementation;
    implementations must raise IncompatibleSetError when handed any other kind of operand
    '''
    # membership
    def insert(self, elem : T) -> None:
        '''Add an element to the set; no-op if it is already a member'''
        ...

    def remove(self, elem : T) -> None:
        '''Remove an element from the set; no-op if it is not a member'''
        ...

    def contains(self, elem : T) -> bool:
        '''Whether the element is a member of this set'''
        ...

    # size
    def cardinality(self) -> int:
        ...

    def is_empty(self) -> bool:
        ...

    # algebra
    def union(self, other : Self) -> Self:
        '''All elements in either this set or the other'''
        ...

    def intersection(self, other : Self) -> Self:
        '''All elements in both this set and the other'''
        ...

    def difference(self, other : Self) -> Self:
        '''All elements in this set which are not in the other (A \\ B)'''
        ...

    def symmetric_difference(self, other : Self) -> Self:
        '''All elements in exactly one of this set and the other ((A \\ B) U (B \\ A))'''
        ...

    # export
    def to_list(self) -> list[T]:
        '''Snapshot of the members of this set, in no particular order'''
        ...

    def __iter__(self) -> Iterator[T]:
        ...
