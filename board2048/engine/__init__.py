# -*- coding: utf-8 -*-
"""
Stateful 2048 board engine.

This module provides the `BoardEngine` class and its `EngineConfig`.
"""

from .board import BoardEngine
from .config import EngineConfig

__all__ = ["BoardEngine", "EngineConfig"]
