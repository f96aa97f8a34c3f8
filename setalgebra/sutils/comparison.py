'''Defines interfaces and Protocols for the partial ordering of collections by inclusion'''

from typing import Protocol, Self


class SetRelatable(Protocol):
    '''
    Objects which can be compared by inclusion, i.e. partially ordered by the subset relation

    Implementors need only supply cardinality(), equals(), is_subset_of() and is_superset_of();
    the proper (strict) variants of the relations are derived from those
    '''
    def cardinality(self) -> int:
        '''The number of members in this collection'''
        ...

    def equals(self, other: Self) -> bool:
        '''Whether this collection has exactly the same members as the other'''
        ...

    def is_subset_of(self, other: Self) -> bool:
        '''Whether every member of this collection is also a member of the other'''
        ...

    def is_superset_of(self, other: Self) -> bool:
        '''Whether every member of the other collection is also a member of this one'''
        ...

    # DEV: the inclusion check is evaluated first so that implementors which validate "other" in
    # is_subset_of()/is_superset_of() reject bad operands before cardinality() is ever called on them
    def is_proper_subset_of(self, other: Self) -> bool:
        '''Whether this collection is a subset of, but not equal to, the other'''
        return self.is_subset_of(other) and (self.cardinality() < other.cardinality())

    def is_proper_superset_of(self, other: Self) -> bool:
        '''Whether this collection is a superset of, but not equal to, the other'''
        return self.is_superset_of(other) and (self.cardinality() > other.cardinality())
