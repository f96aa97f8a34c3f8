'''Ordered pairs, the members of Cartesian products'''

from typing import Generic, Hashable, Iterator, TypeVar
from dataclasses import dataclass


T = TypeVar('T', bound=Hashable)

@dataclass(frozen=True)
class Pair(Generic[T]):
    '''
    An immutable ordered 2-tuple (first, second)
    Two Pairs are equal (and hash identically) iff both of their components are equal
    '''
    first : T
    second : T

    def __iter__(self) -> Iterator[T]: # allows unpacking, e.g. "x, y = pair"
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f'({self.first}, {self.second})'
