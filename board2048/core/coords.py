"""
Grid dimensions and conversions between linear positions and (row, column) coordinates.
"""

from board2048.core.errors import OutOfRangeError

# ##: The grid is fixed to the classic 4x4 layout.
GRID_SIZE = 4
GRID_CELLS = GRID_SIZE * GRID_SIZE


def in_bounds(row: int, col: int, size: int = GRID_SIZE) -> bool:
    """
    Check if a coordinate lies inside the grid.

    Parameters
    ----------
    row : int
        Row index.
    col : int
        Column index.
    size : int, optional
        Dimension of the square grid (default is 4).

    Returns
    -------
    bool
        True if both indices are in ``[0, size)``.
    """
    return 0 <= row < size and 0 <= col < size


def check_coordinates(row: int, col: int, size: int = GRID_SIZE) -> None:
    """
    Validate a coordinate.

    Raises
    ------
    OutOfRangeError
        If row or column is outside ``[0, size)``.
    """
    if not in_bounds(row, col, size):
        raise OutOfRangeError(f'Coordinate ({row}, {col}) is outside [0, {size}).')


def check_position(position: int, size: int = GRID_SIZE) -> None:
    """
    Validate a linear position.

    Raises
    ------
    OutOfRangeError
        If position is outside ``[0, size * size)``.
    """
    if not 0 <= position < size * size:
        raise OutOfRangeError(f'Position {position} is outside [0, {size * size}).')


def row_of(position: int, size: int = GRID_SIZE) -> int:
    """Row index of a linear position."""
    check_position(position, size)
    return position // size


def col_of(position: int, size: int = GRID_SIZE) -> int:
    """Column index of a linear position."""
    check_position(position, size)
    return position % size


def to_coordinates(position: int, size: int = GRID_SIZE) -> tuple[int, int]:
    """
    Convert a linear position into a (row, column) pair.

    Parameters
    ----------
    position : int
        Linear index in ``[0, size * size)``.
    size : int, optional
        Dimension of the square grid (default is 4).

    Returns
    -------
    tuple[int, int]
        The row and the column of the cell.

    Raises
    ------
    OutOfRangeError
        If position is outside the grid.
    """
    return row_of(position, size), col_of(position, size)


def to_position(row: int, col: int, size: int = GRID_SIZE) -> int:
    """
    Convert a (row, column) pair into a linear position.

    Raises
    ------
    OutOfRangeError
        If the coordinate is outside the grid.
    """
    check_coordinates(row, col, size)
    return row * size + col
