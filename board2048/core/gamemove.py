"""
Move legality for the board engine: which directions would change the grid.
"""

from numpy import ndarray

from board2048.core.direction import Direction


def legal_directions_mask(state: ndarray) -> dict[Direction, bool]:
    """
    Get a legality flag for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    dict[Direction, bool]
        True for every direction whose shift would change the grid.

    Notes
    -----
    An equal non-zero pair along a line is always merged by the slot-by-slot shift,
    even when earlier merges in that line chain further, so pairs and gaps decide
    legality on their own.
    """
    # ##>: Rows feed LEFT and RIGHT, a merge pair counts for both.
    west, east = state[:, :-1], state[:, 1:]
    row_pairs = (west != 0) & (west == east)

    # ##>: Columns feed UP and DOWN.
    north, south = state[:-1, :], state[1:, :]
    column_pairs = (north != 0) & (north == south)

    # ##>: A tile with an empty cell on its target side slides.
    left = (west == 0) & (east != 0)
    right = (east == 0) & (west != 0)
    up = (north == 0) & (south != 0)
    down = (south == 0) & (north != 0)

    return {
        Direction.UP: bool(up.any() or column_pairs.any()),
        Direction.DOWN: bool(down.any() or column_pairs.any()),
        Direction.LEFT: bool(left.any() or row_pairs.any()),
        Direction.RIGHT: bool(right.any() or row_pairs.any()),
    }


def legal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions in declaration order (up, down, left, right).
    """
    mask = legal_directions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the grid untouched.

    Notes
    -----
    The engine still spawns tiles after such a shift; this only describes the
    directional pass.
    """
    mask = legal_directions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def can_shift(state: ndarray, direction: Direction | str) -> bool:
    """Check if shifting in one direction changes the grid."""
    return legal_directions_mask(state)[Direction.parse(direction)]
