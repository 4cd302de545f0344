"""Tests for the 7-bag randomizer."""

from __future__ import annotations

import random

from blockfall.game.bag import Bag
from blockfall.game.pieces import ALL_TETROMINO_TYPES


def test_every_cycle_of_seven_is_a_permutation():
    bag = Bag(random.Random(1234))
    draws = [bag.draw() for _ in range(7 * 20)]
    for start in range(0, len(draws), 7):
        assert sorted(draws[start:start + 7]) == sorted(ALL_TETROMINO_TYPES)


def test_remaining_is_refilled_when_emptied():
    bag = Bag(random.Random(0))
    assert len(bag.remaining) == 7
    for expected in (6, 5, 4, 3, 2, 1, 7, 6):
        bag.draw()
        assert len(bag.remaining) == expected


def test_same_seed_gives_same_sequence():
    first = Bag(random.Random(42))
    second = Bag(random.Random(42))
    assert [first.draw() for _ in range(21)] == [second.draw() for _ in range(21)]


def test_order_within_cycles_varies():
    bag = Bag(random.Random(5))
    openers = {tuple(bag.draw() for _ in range(7))[0] for _ in range(200)}
    assert openers == set(ALL_TETROMINO_TYPES)


def test_unseeded_bag_draws_valid_kinds():
    bag = Bag()
    assert all(bag.draw() in ALL_TETROMINO_TYPES for _ in range(14))
