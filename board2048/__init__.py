# -*- coding: utf-8 -*-
"""
Logic engine of the 2048 sliding tile puzzle.
"""

from .core import BoardError, Direction, InvalidArgumentError, OutOfRangeError
from .engine import BoardEngine, EngineConfig

__all__ = ["BoardEngine", "EngineConfig", "Direction", "BoardError", "OutOfRangeError", "InvalidArgumentError"]
