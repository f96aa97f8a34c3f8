'''Unit tests for equality and inclusion relations between HashSets'''

import pytest

from setalgebra.sets.hashset import HashSet


@pytest.mark.parametrize(
    'elems1, elems2, is_subset, is_superset, is_proper_sub, is_proper_super',
    [
        ([], [], True, True, False, False), # empty set is an improper subset and superset of itself
        ([1, 2], [1, 2, 3], True, False, True, False),
        ([1, 2, 3], [1, 2], False, True, False, True),
        ([1, 2], [3, 4], False, False, False, False), # disjoint
        ([1, 2, 3], [1, 2, 3], True, True, False, False), # equal
        ([1, 2, 4], [1, 2, 3], False, False, False, False), # equal size, not equal
        ([], [1], True, False, True, False),
    ]
)
def test_set_relations(
        elems1 : list[int],
        elems2 : list[int],
        is_subset : bool,
        is_superset : bool,
        is_proper_sub : bool,
        is_proper_super : bool,
    ) -> None:
    '''Test subset and superset relations (and their proper variants) between pairs of sets'''
    set1, set2 = HashSet(elems1), HashSet(elems2)
    assert set1.is_subset_of(set2) == is_subset
    assert set1.is_superset_of(set2) == is_superset
    assert set1.is_proper_subset_of(set2) == is_proper_sub
    assert set1.is_proper_superset_of(set2) == is_proper_super

@pytest.mark.parametrize(
    'elems1, elems2',
    [
        ([], []),
        ([1], []),
        ([1, 2], [1, 2, 3]),
        ([1, 2], [3, 4]),
        (['a', 'b'], ['b', 'a']),
    ]
)
def test_subset_superset_duality(elems1 : list, elems2 : list) -> None:
    '''Test that A is a (proper) subset of B exactly when B is a (proper) superset of A'''
    set1, set2 = HashSet(elems1), HashSet(elems2)
    assert set1.is_subset_of(set2) == set2.is_superset_of(set1)
    assert set1.is_proper_subset_of(set2) == set2.is_proper_superset_of(set1)

@pytest.mark.parametrize(
    'elems1, elems2, expected_equal',
    [
        ([], [], True),
        ([1, 2, 3], [3, 2, 1], True),
        ([1, 2], [1, 2, 3], False),
        ([1, 2, 3], [1, 2, 4], False),
        (['', 0, None], [None, '', 0], True),
    ]
)
def test_set_equality(elems1 : list, elems2 : list, expected_equal : bool) -> None:
    '''Test that sets are equal iff they have the same members, irrespective of insertion order'''
    set1, set2 = HashSet(elems1), HashSet(elems2)
    assert set1.equals(set2) == expected_equal
    assert set2.equals(set1) == expected_equal

def test_proper_relations_exclude_self() -> None:
    '''Test that no set is a proper subset or superset of itself'''
    hs = HashSet.of(1, 2, 3)
    assert hs.is_subset_of(hs) and hs.is_superset_of(hs)
    assert not (hs.is_proper_subset_of(hs) or hs.is_proper_superset_of(hs))
