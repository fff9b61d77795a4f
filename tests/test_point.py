"""Tests for share points and their string form."""

import pytest

from shamirkit.crypto.point import Point
from shamirkit.errors import InvalidArgument, InvalidShare


def test_structural_equality_and_hash():
    assert Point(1, 2) == Point(1, 2)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1, 2)}) == 1


def test_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_unpacks_like_a_tuple():
    x, y = Point(3, 9)
    assert (x, y) == (3, 9)


def test_share_string_format():
    assert Point(3, 255).to_share_string() == "3-ff"


def test_share_string_keeps_full_precision():
    y = 2**4423 - 2
    p = Point(7, y)
    assert Point.from_share_string(p.to_share_string()) == p


def test_transpose():
    xs, ys = Point.transpose([Point(1, 10), Point(2, 20)])
    assert xs == [1, 2]
    assert ys == [10, 20]


@pytest.mark.parametrize("text", ["", "3", "3-", "-ff", "x-ff", "3-zz", "0-ff", "3--ff"])
def test_malformed_share_strings(text):
    with pytest.raises(InvalidShare):
        Point.from_share_string(text)


def test_invalid_share_is_invalid_argument():
    with pytest.raises(InvalidArgument):
        Point.from_share_string("nope")


@pytest.mark.parametrize("text", ["²-ff", "١-ff", "3²-ff"])
def test_non_ascii_digits_in_x_rejected(text):
    with pytest.raises(InvalidShare):
        Point.from_share_string(text)


@pytest.mark.parametrize("x,y", [(-1, 5), (1, -5), (1.0, 5), (1, "ff"), (True, 5)])
def test_coordinates_must_be_non_negative_ints(x, y):
    with pytest.raises(InvalidArgument):
        Point(x, y)


def test_zero_coordinates_allowed():
    assert Point(0, 0).y == 0
