# -*- coding: utf-8 -*-
"""
Engine specific configuration.
"""
import logging
import os
from dataclasses import dataclass, replace

from board2048.core.errors import InvalidArgumentError

SEED_VARIABLE = 'BOARD2048_SEED'
LOG_LEVEL_VARIABLE = 'BOARD2048_LOG_LEVEL'


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration of a board engine.

    Attributes
    ----------
    seed : int, optional
        Seed of the random generator; None draws fresh entropy.
    log_level : str
        Name of the logging level used by the command line drivers.
    """

    seed: int | None = None
    log_level: str = 'WARNING'

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidArgumentError(f'Unknown log level: {self.log_level!r}.')

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """
        Build a configuration from ``BOARD2048_SEED`` and ``BOARD2048_LOG_LEVEL``.

        Raises
        ------
        InvalidArgumentError
            If the seed is not an integer or the level is unknown.
        """
        raw_seed = os.environ.get(SEED_VARIABLE)
        seed = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as error:
                raise InvalidArgumentError(f'{SEED_VARIABLE} must be an integer, got {raw_seed!r}.') from error
        return cls(seed=seed, log_level=os.environ.get(LOG_LEVEL_VARIABLE, 'WARNING'))

    def override(self, seed: int | None = None, log_level: str | None = None) -> 'EngineConfig':
        """
        Copy the configuration, replacing the values that are given.

        Parameters
        ----------
        seed : int, optional
            New seed; None keeps the current one.
        log_level : str, optional
            New logging level name; None keeps the current one.
        """
        changes = {}
        if seed is not None:
            changes['seed'] = seed
        if log_level is not None:
            changes['log_level'] = log_level
        return replace(self, **changes)

    def configure_logging(self) -> None:
        """Install a root handler at the configured level."""
        logging.basicConfig(level=self.log_level.upper())
