import pytest
from marketplace.utils.geo import distance, within_range, is_too_far, MAX_DISTANCE


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (3.0, 4.0)),
        ((12.5, 80.1), (99.0, 0.3)),
        ((-5.0, 7.0), (5.0, -7.0)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert distance(*a, *b) == distance(*b, *a)


def test_distance_is_planar():
    assert distance(0, 0, 3, 4) == 5.0
    assert distance(0, 0, 0, 29) == 29.0


def test_distance_zero_for_same_point():
    assert distance(42.0, 17.5, 42.0, 17.5) == 0
    assert distance(0, 0, 0, 0.0001) > 0


def test_within_range_is_strict():
    assert MAX_DISTANCE == 30
    assert not within_range(30)
    assert within_range(29.999)
    assert not within_range(31)


def test_order_gate_allows_exact_threshold():
    assert not is_too_far(30)
    assert is_too_far(30.001)
    assert not is_too_far(29)
