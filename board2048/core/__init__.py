# -*- coding: utf-8 -*-
"""
This module provides the array-level logic of the 2048 board engine.

It includes coordinate conversions, directions, tile insertion, shifting and merging,
move legality and terminal detection, plus the exceptions they raise.
"""

from .coords import GRID_CELLS, GRID_SIZE, check_coordinates, to_coordinates, to_position
from .direction import Direction, ShiftAxis, shift_axis
from .errors import BoardError, InvalidArgumentError, OutOfRangeError
from .gameboard import (
    SPAWN_COUNT,
    TILE_VALUE,
    add_random_tile,
    add_tile,
    fill_cells,
    is_done,
    latent_state,
    new_board,
    next_state,
    shift_line,
    slide_and_merge,
)
from .gamemove import can_shift, illegal_directions, legal_directions

__all__ = [
    "GRID_SIZE",
    "GRID_CELLS",
    "TILE_VALUE",
    "SPAWN_COUNT",
    "check_coordinates",
    "to_coordinates",
    "to_position",
    "Direction",
    "ShiftAxis",
    "shift_axis",
    "BoardError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "new_board",
    "add_tile",
    "add_random_tile",
    "fill_cells",
    "shift_line",
    "slide_and_merge",
    "latent_state",
    "next_state",
    "is_done",
    "can_shift",
    "legal_directions",
    "illegal_directions",
]
