'''Hash table-backed implementation of mathematical sets'''

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Any,
    ClassVar,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)

from .interface import Set, IncompatibleSetError


T = TypeVar('T', bound=Hashable)

class HashSet(Set[T]):
    '''
    A mutable set of unique, hashable elements with O(1) expected-time membership testing

    Equality via "==" and hashing are by identity, as for any other reference; use equals()
    to compare two sets by their members. This allows (mutable) HashSets to be members of other
    HashSets, as is needed for power sets, without the outer set being corrupted by later mutation
    '''
    SEPARATOR : ClassVar[str] = ', '
    BRACES : ClassVar[tuple[str, str]] = ('{', '}')

    def __init__(self, elements : Optional[Iterable[T]]=None) -> None:
        self._elements : set[T] = set()
        if elements is not None:
            for elem in elements:
                self.insert(elem)

    @classmethod
    def of(cls, *elements : T) -> 'HashSet[T]':
        '''Build a set containing exactly the given elements (with duplicates collapsed)'''
        return cls(elements)

    # Operand validation
    def _compatible(self, other : Any, operation : str) -> 'HashSet[T]':
        '''Return "other" unchanged if it shares this set's internal representation, raising IncompatibleSetError otherwise'''
        if not isinstance(other, HashSet):
            LOGGER.debug(f'Rejected operand of type {type(other).__name__} passed to {self.__class__.__name__}.{operation}()')
            raise IncompatibleSetError(
                f'{self.__class__.__name__}.{operation}() is only supported between HashSets, not with {type(other).__name__}'
            )
        return other

    # Membership
    def insert(self, elem : T) -> None:
        self._elements.add(elem)

    def remove(self, elem : T) -> None:
        self._elements.discard(elem)

    def contains(self, elem : T) -> bool:
        return elem in self._elements

    def cardinality(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    ## Python container protocol
    def __contains__(self, elem : T) -> bool:
        return self.contains(elem)

    def __len__(self) -> int:
        return self.cardinality()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    # Export and copying
    def to_list(self) -> list[T]:
        '''Snapshot of the members of this set, in no particular order; later changes to the set are not reflected in it'''
        return [elem for elem in self._elements]

    def copy(self) -> 'HashSet[T]':
        '''An independent (shallow) copy of this set, which can be mutated without affecting the original'''
        clone = self.__class__()
        clone._elements = set(self._elements)

        return clone

    # Relations
    def equals(self, other : 'HashSet[T]') -> bool:
        '''Whether both sets contain exactly the same elements'''
        other = self._compatible(other, 'equals')
        if self.cardinality() != other.cardinality():
            return False

        return all(other.contains(elem) for elem in self._elements) # equal sizes make one-way containment sufficient

    def is_subset_of(self, other : 'HashSet[T]') -> bool:
        '''Whether every element of this set is also an element of the other'''
        other = self._compatible(other, 'is_subset_of')
        if self.cardinality() > other.cardinality():
            return False

        return all(other.contains(elem) for elem in self._elements)

    def is_superset_of(self, other : 'HashSet[T]') -> bool:
        '''Whether every element of the other set is also an element of this one'''
        other = self._compatible(other, 'is_superset_of')
        return other.is_subset_of(self)

    # Algebra
    def union(self, other : 'HashSet[T]') -> 'HashSet[T]':
        '''New set of all elements in either set'''
        other = self._compatible(other, 'union')
        union_set = self.__class__()
        for elem in self._elements:
            union_set.insert(elem)
        for elem in other._elements:
            union_set.insert(elem)

        return union_set

    def intersection(self, other : 'HashSet[T]') -> 'HashSet[T]':
        '''
        New set of all elements present in both sets

        Only the smaller of the two sets is traversed (probing the larger for membership),
        so the cost is bounded by the smaller cardinality regardless of argument order
        '''
        other = self._compatible(other, 'intersection')
        smaller, larger = self, other
        if self.cardinality() > other.cardinality():
            smaller, larger = other, self

        intersection_set = self.__class__()
        for elem in smaller._elements:
            if larger.contains(elem):
                intersection_set.insert(elem)

        return intersection_set

    def difference(self, other : 'HashSet[T]') -> 'HashSet[T]':
        '''New set of elements in this set but not in the other'''
        other = self._compatible(other, 'difference')
        difference_set = self.__class__()
        for elem in self._elements:
            if not other.contains(elem):
                difference_set.insert(elem)

        return difference_set

    def symmetric_difference(self, other : 'HashSet[T]') -> 'HashSet[T]':
        '''New set of elements in exactly one of the two sets'''
        other = self._compatible(other, 'symmetric_difference')
        sym_diff_set = self.__class__()
        for elem in self._elements:
            if not other.contains(elem):
                sym_diff_set.insert(elem)
        for elem in other._elements:
            if not self.contains(elem):
                sym_diff_set.insert(elem)

        return sym_diff_set

    ## Operator aliases, mirroring those of the builtin set
    __or__ = union
    __and__ = intersection
    __sub__ = difference
    __xor__ = symmetric_difference

    # Display
    def __str__(self) -> str:
        elems = self.to_list()
        if elems and all(isinstance(elem, str) for elem in elems): # only text has a natural, deterministic rendering order
            elems.sort()
        opener, closer = self.BRACES

        return opener + self.SEPARATOR.join(str(elem) for elem in elems) + closer

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self!s})'
