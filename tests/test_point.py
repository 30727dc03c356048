import pytest

from aoc2025.point import Pair, Point


def test_direction_constants():
    assert Point.origin() == Point(0, 0)
    assert Point.up() == Point(0, -1)
    assert Point.down() == Point(0, 1)
    assert Point.left() == Point(-1, 0)
    assert Point.right() == Point(1, 0)


def test_opposite_directions_cancel():
    assert Point.up() + Point.down() == Point.origin()
    assert Point.left() + Point.right() == Point.origin()
    assert -Point.up() == Point.down()


@pytest.mark.parametrize("a,b", [(Point(1, 2), Point(3, 4)), (Point(-5, 7), Point(0, -9))])
def test_add_sub_round_trip(a, b):
    assert a + b - b == a
    assert a - b + b == a
    assert a + b == b + a


def test_identity_and_negation():
    p = Point(6, -11)
    assert p + Point.origin() == p
    assert -(-p) == p
    assert p + (-p) == Point.origin()


def test_multiplication_matches_repeated_addition():
    p = Point(3, -2)
    assert p * 2 == p + p
    assert p * 3 == p + p + p
    assert p * 0 == Point.origin()
    assert p * -1 == -p


def test_add_rejects_non_point():
    with pytest.raises(TypeError):
        Point(1, 1) + 1


def test_point_is_hashable_and_frozen():
    assert len({Point(1, 2), Point(1, 2)}) == 1
    with pytest.raises(AttributeError):
        Point(1, 2).x = 5


def test_pair_create_or_empty():
    assert Pair.create_or_empty(4, 3) is None
    assert Pair.create_or_empty(3, 3) == Pair(3, 3)
    assert Pair.create_or_empty(3, 9) == Pair(3, 9)


def test_pair_ordered_sorts_bounds():
    assert Pair.ordered(5, 3) == Pair(3, 5)
    assert Pair.ordered(3, 5) == Pair(3, 5)
    assert Pair.ordered(7, 7) == Pair(7, 7)


def test_pair_as_tuple_round_trip():
    pair = Pair(10, 14)
    assert pair.as_tuple() == (10, 14)
    assert Pair.ordered(*pair.as_tuple()) == pair