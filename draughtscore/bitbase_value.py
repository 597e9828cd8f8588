"""Game-theoretic values stored in endgame tables and how they combine."""

from __future__ import annotations

import enum


class Value(enum.IntEnum):
    DRAW = 0
    LOSS = 1
    WIN = 2
    UNKNOWN = 3


# Preference order: loss < unknown < draw < win.
_ORDER = {Value.DRAW: 2, Value.LOSS: 0, Value.WIN: 3, Value.UNKNOWN: 1}


def value_age(val: int) -> Value:
    """The value seen from the other side."""
    if val == Value.WIN:
        return Value.LOSS
    if val == Value.LOSS:
        return Value.WIN
    return Value(val)


def value_max(v0: int, v1: int) -> Value:
    """The better of two values; ``v0`` must not already be a win."""
    if v0 == Value.WIN:
        raise ValueError("node is already a win")
    return Value(v1) if _ORDER[Value(v1)] > _ORDER[Value(v0)] else Value(v0)


def value_update(node: int, child: int) -> Value:
    """Fold a child's value into its parent's running value."""
    return value_max(node, value_age(child))


def value_from_nega(val: int) -> Value:
    """Value from a signed result: positive win, negative loss, zero draw."""
    if val > 0:
        return Value.WIN
    if val < 0:
        return Value.LOSS
    return Value.DRAW


def value_to_string(val: int) -> str:
    names = {Value.WIN: "win", Value.LOSS: "loss", Value.DRAW: "draw"}
    return names.get(val, "unknown")