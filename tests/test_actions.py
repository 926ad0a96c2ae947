import dataclasses

import pytest

from tetrust.actions import Action, HardDrop, Hold, Move, Reset, Rotate


def test_move_equality_by_value():
    assert Move(1.0) == Move(1.0)
    assert (Move(1.0) == Move(-1.0)) is False
    assert Move(-1.0).dx == -1.0


def test_rotate_carries_angle():
    assert Rotate(0.5).radians == 0.5
    assert Rotate(0.5) == Rotate(0.5)


def test_unit_actions_are_equal_and_hashable():
    actions = {HardDrop(), HardDrop(), Hold(), Reset(), Reset()}
    assert len(actions) == 3


def test_all_are_actions_and_distinct():
    items = [Move(1.0), Rotate(1.0), HardDrop(), Reset(), Hold()]
    assert all(isinstance(item, Action) for item in items)
    assert len(set(items)) == len(items)


def test_actions_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Move(1.0).dx = 2.0