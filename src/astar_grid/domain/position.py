# domain/position.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    x: int  # grid column, may lie outside the grid
    y: int

    @classmethod
    def of(cls, value: Position | tuple[int, int]) -> Position:
        if isinstance(value, Position):
            return value
        x, y = value
        return cls(int(x), int(y))


PositionLike = Position | tuple[int, int]
