'''
Sets derived from other sets, namely
Cartesian products of pairs of sets and power sets of individual sets
'''

import logging
LOGGER = logging.getLogger(__name__)

from typing import Hashable, TypeVar
from itertools import product as cartesian

from .interface import IncompatibleSetError
from .hashset import HashSet
from .pair import Pair


T = TypeVar('T', bound=Hashable)

POWER_SET_WARN_CARDINALITY : int = 16 # power sets of sets larger than this have upwards of 2**16 members

def _require_hashset(obj : object, operation : str) -> HashSet:
    '''Check that an argument to a set construction is a HashSet, raising IncompatibleSetError if not'''
    if not isinstance(obj, HashSet):
        raise IncompatibleSetError(f'{operation}() is only supported for HashSets, not {type(obj).__name__}')
    return obj

def cartesian_product(s1 : HashSet[T], s2 : HashSet[T]) -> HashSet[Pair[T]]:
    '''
    Compute the set of all ordered pairs drawn from two sets,
    i.e. A x B = {(x, y) | x in A, y in B}

    For example, if A = {1, 2} and B = {3, 4}, then
    cartesian_product(A, B) = {(1, 3), (1, 4), (2, 3), (2, 4)}

    Parameters
    ----------
    s1 : HashSet[T]
        The set from which the first component of each pair is drawn
    s2 : HashSet[T]
        The set from which the second component of each pair is drawn

    Returns
    -------
    product : HashSet[Pair[T]]
        A new set of Pairs, with cardinality exactly |s1| * |s2|
        (and therefore empty whenever either input is empty)
    '''
    s1 = _require_hashset(s1, 'cartesian_product')
    s2 = _require_hashset(s2, 'cartesian_product')
    LOGGER.debug(f'Forming Cartesian product of sets with {s1.cardinality()} and {s2.cardinality()} elements')

    product = HashSet()
    for elem1, elem2 in cartesian(s1.to_list(), s2.to_list()):
        product.insert(Pair(first=elem1, second=elem2))

    return product

def power_set(s : HashSet[T]) -> HashSet[HashSet[T]]:
    '''
    Compute the set of all subsets of a set, i.e. P(S) = {X | X is a subset of S}

    Starting from the set containing only the empty set, each element of S in turn
    is added to a copy of every subset found so far, doubling the number of subsets each time

    For example, if S = {1, 2}, then power_set(S) = {{}, {1}, {2}, {1, 2}}

    Parameters
    ----------
    s : HashSet[T]
        The set whose subsets are to be enumerated

    Returns
    -------
    subsets : HashSet[HashSet[T]]
        A new set of 2**|s| subsets; every subset is an independent copy, sharing no storage
        with any other subset or with s itself, and so can be freely mutated afterwards
    '''
    s = _require_hashset(s, 'power_set')
    if s.cardinality() > POWER_SET_WARN_CARDINALITY:
        LOGGER.warning(f'Power set of a set with {s.cardinality()} elements will contain 2**{s.cardinality()} subsets')

    subsets = HashSet()
    subsets.insert(HashSet())
    for elem in s.to_list():
        for subset in subsets.to_list(): # snapshot, since subsets grows while being traversed
            new_subset = subset.copy()
            new_subset.insert(elem)
            subsets.insert(new_subset)
        LOGGER.debug(f'Power set grown to {subsets.cardinality()} subsets after including "{elem!s}"')

    return subsets
