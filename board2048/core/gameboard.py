"""
Core functionality of the board engine: emptiness tests, tile insertion, shifting and
merging, and terminal detection.

Every function works on a ``(4, 4)`` integer array where 0 marks an empty cell.
"""

import logging

from numpy import array_equal, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from board2048.core.coords import GRID_CELLS, GRID_SIZE, in_bounds, to_coordinates
from board2048.core.direction import Direction, shift_axis
from board2048.core.errors import InvalidArgumentError

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##: Every spawned tile holds the base value.
TILE_VALUE = 2

# ##: Number of tiles placed on a fresh board and after every shift.
SPAWN_COUNT = 2

# ##>: Module-level generator, used when the caller injects none.
_GENERATOR = default_rng(PCG64DXSM())


def new_board() -> ndarray:
    """Create an empty grid."""
    return zeros((GRID_SIZE, GRID_SIZE), dtype=int64)


def is_empty(state: ndarray, row: int, col: int) -> bool:
    """
    Check if a cell is in bounds and holds no tile.

    Out-of-bounds coordinates are never empty.
    """
    if not in_bounds(row, col, state.shape[0]):
        return False
    return bool(state[row, col] == 0)


def has_space(state: ndarray) -> bool:
    """Check if the grid contains at least one empty cell."""
    return not state.all()


def count_empty(state: ndarray) -> int:
    """Number of empty cells in the grid."""
    return int((state == 0).sum())


def add_tile(state: ndarray, position: int) -> bool:
    """
    Place a base tile at a linear position if the cell is empty.

    Parameters
    ----------
    state : ndarray
        The game board. **Modified in-place.**
    position : int
        Linear index in ``[0, 16)``.

    Returns
    -------
    bool
        True if the tile was written, False if the cell was occupied.

    Raises
    ------
    OutOfRangeError
        If the position is outside the grid.
    """
    row, col = to_coordinates(position, state.shape[0])
    if not is_empty(state, row, col):
        return False
    state[row, col] = TILE_VALUE
    return True


def add_random_tile(state: ndarray, generator: Generator | None = None) -> bool:
    """
    Try once to place a base tile at a uniformly drawn position.

    Parameters
    ----------
    state : ndarray
        The game board. **Modified in-place.**
    generator : Generator, optional
        Random generator; the module generator is used when omitted.

    Returns
    -------
    bool
        True if a tile was placed. False if the drawn cell was occupied, or if the
        grid is full, in which case nothing is drawn.
    """
    if not has_space(state):
        return False
    rng = generator if generator is not None else _GENERATOR
    return add_tile(state, int(rng.integers(GRID_CELLS)))


def fill_cells(state: ndarray, number_tile: int, generator: Generator | None = None) -> int:
    """
    Place base tiles at random empty positions.

    Parameters
    ----------
    state : ndarray
        The game board. **Modified in-place.**
    number_tile : int
        Number of tiles to place.
    generator : Generator, optional
        Random generator; the module generator is used when omitted.

    Returns
    -------
    int
        Number of tiles actually placed.

    Raises
    ------
    InvalidArgumentError
        If ``number_tile`` is negative.

    Notes
    -----
    - A draw landing on an occupied cell is retried without counting.
    - If the grid fills up, the remaining tiles are dropped; each placement removes
      one empty cell, so the loop always ends.
    """
    if number_tile < 0:
        raise InvalidArgumentError(f'number_tile must be >= 0, got {number_tile}')

    placed = 0
    while placed < number_tile:
        if not has_space(state):
            _logger.debug('Grid full, %d of %d tiles placed', placed, number_tile)
            break
        if add_random_tile(state, generator):
            placed += 1
    return placed


def _is_empty_at(line: ndarray, pos: int) -> bool:
    return 0 <= pos < len(line) and line[pos] == 0


def _can_merge_at(line: ndarray, pos: int, value: int) -> bool:
    return 0 <= pos < len(line) and line[pos] == value


def shift_line(line: ndarray, step: int) -> int:
    """
    Shift one line toward its target end and merge equal neighbours.

    Parameters
    ----------
    line : ndarray
        A row or column of the board. **Modified in-place** (views write through).
    step : int
        -1 to move tiles toward index 0, +1 toward the last index.

    Returns
    -------
    int
        The sum of the values created by merges.

    Notes
    -----
    - Slots are visited from the target end inward. The tile in each slot walks
      toward the target while the next cell is empty, then merges into the cell it
      stopped against when that cell holds the same value.
    - A merged tile is not protected from a later merge in the same pass:
      ``[2, 2, 4, 0]`` shifted toward index 0 gives ``[8, 0, 0, 0]`` for 12 points.
    """
    size = len(line)
    slots = range(size) if step < 0 else range(size - 1, -1, -1)
    score = 0

    for slot in slots:
        # ##: Slide the tile until it stops against a tile or the edge.
        pos = slot + step
        while _is_empty_at(line, pos):
            line[pos] = line[pos - step]
            line[pos - step] = 0
            pos += step

        # ##: Merge into the blocking tile when both hold the same value.
        if _can_merge_at(line, pos, line[pos - step]):
            line[pos] *= 2
            score += int(line[pos])
            line[pos - step] = 0

    return score


def slide_and_merge(state: ndarray, direction: Direction | str) -> tuple[int, ndarray]:
    """
    Shift the whole board in one direction, merge tiles, and compute the gained score.

    Parameters
    ----------
    state : ndarray
        The game board; left untouched.
    direction : Direction or str
        Direction of the shift.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after shifting and merging, without new tiles.

    Raises
    ------
    InvalidArgumentError
        If the direction is unknown.
    """
    axis, step = shift_axis(direction)
    result = state.copy()
    score = 0

    for index in range(result.shape[0]):
        line = result[:, index] if axis == 0 else result[index, :]
        score += shift_line(line, step)

    return score, result


def latent_state(state: ndarray, direction: Direction | str) -> tuple[ndarray, int]:
    """
    Compute the board after a shift, without adding new tiles.

    Returns
    -------
    new_state : ndarray
        The board after the shift.
    reward : int
        The score gained by the shift.
    """
    reward, updated_board = slide_and_merge(state, direction)
    return updated_board, reward


def next_state(state: ndarray, direction: Direction | str, generator: Generator | None = None) -> tuple[ndarray, int]:
    """
    Compute the next board and reward after a shift.

    Parameters
    ----------
    state : ndarray
        The current board; left untouched.
    direction : Direction or str
        Direction of the shift.
    generator : Generator, optional
        Random generator used for the new tiles.

    Returns
    -------
    new_state : ndarray
        The board after the shift and the new tiles.
    reward : int
        The score gained by the shift.

    Notes
    -----
    Two tiles are spawned even when the shift changed nothing.
    """
    updated_board, reward = latent_state(state, direction)
    fill_cells(updated_board, number_tile=SPAWN_COUNT, generator=generator)
    return updated_board, reward


def has_changed(before: ndarray, after: ndarray) -> bool:
    """Check if two boards differ."""
    return not array_equal(before, after)


def is_done(state: ndarray) -> bool:
    """
    Check if the game is lost.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if there is no empty cell and no two cardinal neighbours share a value.
    """
    if has_space(state):
        return False
    return not ((state[:-1] == state[1:]).any() or (state[:, :-1] == state[:, 1:]).any())
