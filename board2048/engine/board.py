"""2048 board engine: the stateful call surface driven by a presentation layer."""

import logging

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from board2048.core.coords import check_coordinates
from board2048.core.direction import ACTIONS, Direction
from board2048.core.gameboard import SPAWN_COUNT, count_empty, fill_cells, has_changed, is_done, new_board, slide_and_merge
from board2048.core.gamemove import legal_directions
from board2048.engine.config import EngineConfig

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class BoardEngine:
    """
    2048 board engine.

    This class owns the tile grid, the score and the random generator. It places two
    tiles on creation, shifts and merges tiles on request, and reports when the game
    is lost.

    Notes
    -----
    The engine holds no lock. A caller driving it from several threads must guard
    every ``shift``/``reset`` and every read that may run alongside them.
    """

    # ##: All Actions.
    ACTIONS = ACTIONS

    def __init__(self, seed: int | None = None, generator: Generator | None = None, config: EngineConfig | None = None):
        """
        Initialize the board with two random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of the engine's generator. Overrides the configuration's seed.
        generator : Generator, optional
            Ready generator to use instead of building one. Overrides any seed.
        config : EngineConfig, optional
            Engine configuration (default is ``EngineConfig()``).
        """
        self.config = config if config is not None else EngineConfig()
        if generator is None:
            seed = seed if seed is not None else self.config.seed
            generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())
        self._generator = generator

        self._board = new_board()
        self._score = 0
        self.reset()

    def value(self, row: int, col: int) -> int:
        """
        Get the tile value at a coordinate.

        Raises
        ------
        OutOfRangeError
            If row or column is outside ``[0, 4)``.
        """
        check_coordinates(row, col)
        return int(self._board[row, col])

    def score(self) -> int:
        """Get the accumulated score."""
        return self._score

    @property
    def board(self) -> ndarray:
        """A copy of the grid."""
        return self._board.copy()

    @property
    def max_tile(self) -> int:
        """Largest tile on the grid."""
        return int(self._board.max())

    @property
    def empty_cells(self) -> int:
        """Number of empty cells."""
        return count_empty(self._board)

    def legal_directions(self) -> list[Direction]:
        """Directions whose shift would move or merge at least one tile."""
        return legal_directions(self._board)

    def shift(self, direction: Direction | str) -> bool:
        """
        Shift every line in a direction, merge tiles, then add two new tiles.

        Parameters
        ----------
        direction : Direction or str
            The direction, or its name (``"up"``, ``"down"``, ``"left"``, ``"right"``).

        Returns
        -------
        bool
            True if the shift moved or merged at least one tile.

        Raises
        ------
        InvalidArgumentError
            If the direction is unknown.

        Notes
        -----
        - The score grows by the value of every tile created by a merge.
        - New tiles are added even when nothing moved.
        """
        direction = Direction.parse(direction)
        gained, updated_board = slide_and_merge(self._board, direction)
        moved = has_changed(self._board, updated_board)

        self._board = updated_board
        self._score += gained
        fill_cells(self._board, number_tile=SPAWN_COUNT, generator=self._generator)

        _logger.debug('Shift %s: gained=%d, moved=%s, score=%d', direction.value, gained, moved, self._score)
        if is_done(self._board):
            _logger.info('Game over: score=%d, max tile=%d', self._score, self.max_tile)
        return moved

    def is_game_over(self) -> bool:
        """
        Check if the game is lost.

        Returns
        -------
        bool
            True if the grid is full and no two neighbouring tiles share a value.
        """
        return is_done(self._board)

    def reset(self) -> None:
        """Clear the grid, zero the score and add two random tiles."""
        self._board = new_board()
        self._score = 0
        fill_cells(self._board, number_tile=SPAWN_COUNT, generator=self._generator)
        _logger.debug('Board reset')

    def render(self) -> None:
        """
        Render the game board. This method prints the current grid to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))

    def __str__(self) -> str:
        rows = '\n'.join(str(row) for row in self._board.tolist())
        return f'{rows}\nScore: {self._score}'
