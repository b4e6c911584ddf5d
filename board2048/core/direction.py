"""
Shift directions and the axis/step descriptor shared by the four moves.
"""

from enum import Enum
from typing import NamedTuple

from board2048.core.errors import InvalidArgumentError


class Direction(str, Enum):
    """
    Direction of a shift.

    UP and DOWN move tiles along columns, LEFT and RIGHT along rows.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value: 'Direction | str') -> 'Direction':
        """
        Coerce a direction or its case-insensitive name into a ``Direction``.

        Parameters
        ----------
        value : Direction or str
            The direction, or one of ``"up"``, ``"down"``, ``"left"``, ``"right"``.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        InvalidArgumentError
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name in ACTIONS:
                return ACTIONS[name]
        raise InvalidArgumentError(f'Unknown direction: {value!r}.')


# ##: Names accepted for each direction.
ACTIONS: dict[str, Direction] = {direction.value: direction for direction in Direction}


class ShiftAxis(NamedTuple):
    """
    How a direction walks the grid.

    Attributes
    ----------
    axis : int
        0 when lines are columns (tiles move between rows), 1 when lines are rows.
    step : int
        Index step toward the target edge: -1 toward index 0, +1 toward the last index.
    """

    axis: int
    step: int


# ##: UP/LEFT target index 0, DOWN/RIGHT target the last index.
SHIFT_AXES: dict[Direction, ShiftAxis] = {
    Direction.UP: ShiftAxis(axis=0, step=-1),
    Direction.DOWN: ShiftAxis(axis=0, step=1),
    Direction.LEFT: ShiftAxis(axis=1, step=-1),
    Direction.RIGHT: ShiftAxis(axis=1, step=1),
}


def shift_axis(direction: Direction | str) -> ShiftAxis:
    """
    Get the descriptor of a direction.

    Raises
    ------
    InvalidArgumentError
        If the direction is unknown.
    """
    return SHIFT_AXES[Direction.parse(direction)]
