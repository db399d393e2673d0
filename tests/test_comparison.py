import itertools as it

import pytest

from dualpq import PriorityQueue

PAIRS = [(3, 'c'), (1, 'a'), (2, 'b'), (1, 'z')]

def test_empty_queues_are_equal():
    assert PriorityQueue() == PriorityQueue()
    assert not PriorityQueue() < PriorityQueue()
    assert PriorityQueue() <= PriorityQueue()


def test_equality_is_reflexive_and_symmetric(build):
    a = build(PAIRS)
    b = build(PAIRS)
    assert a == a
    assert a == b and b == a
    assert not a != b


@pytest.mark.parametrize('order', list(it.permutations(PAIRS)))
def test_equality_ignores_insertion_order(build, order):
    assert build(order) == build(PAIRS)


def test_unequal_contents(build):
    assert build([(1, 1)]) != build([(1, 2)])
    assert build([(1, 1)]) != build([(2, 1)])
    assert build([(1, 1)]) != build([(1, 1), (1, 1)])


def test_less_than_by_key_first(build):
    assert build([(1, 100)]) < build([(2, 0)])
    assert not build([(2, 0)]) < build([(1, 100)])


def test_less_than_by_value_on_equal_keys(build):
    assert build([(1, 1)]) < build([(1, 2)])
    assert not build([(1, 2)]) < build([(1, 1)])


def test_prefix_is_smaller(build):
    short = build([(1, 1)])
    long = build([(1, 1), (2, 2)])
    assert short < long
    assert not long < short
    assert long > short


def test_first_difference_decides(build):
    a = build([(1, 1), (3, 3)])
    b = build([(1, 1), (2, 9), (5, 5)])
    assert b < a
    assert a > b
    assert b <= a
    assert a >= b


def test_equal_queues_are_not_less(build):
    a = build(PAIRS)
    b = build(PAIRS)
    assert not a < b
    assert not a > b
    assert a <= b
    assert a >= b


def test_derived_operators_agree(build):
    queues = [build([]), build([(1, 1)]), build([(1, 2)]), build([(1, 1), (0, 5)]), build([(2, 0)])]
    for a, b in it.product(queues, repeat=2):
        assert (a > b) == (b < a)
        assert (a <= b) == (a < b or a == b)
        assert (a >= b) == (not a < b)
        assert (a != b) == (not a == b)


def test_comparison_with_other_types(build):
    queue = build([(1, 1)])
    assert not queue == [(1, 1)]
    assert queue != [(1, 1)]
    with pytest.raises(TypeError):
        queue < [(1, 1)]


def test_queues_are_unhashable(build):
    with pytest.raises(TypeError):
        hash(build([(1, 1)]))
