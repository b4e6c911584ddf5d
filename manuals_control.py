# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
from argparse import ArgumentParser
from typing import Callable, List, Optional

from board2048 import BoardEngine, Direction, EngineConfig, InvalidArgumentError

KEYS = {"w": Direction.UP, "a": Direction.LEFT, "s": Direction.DOWN, "d": Direction.RIGHT}


def redraw(engine: BoardEngine, output: Callable[[str], None] = print):
    """
    Redraw the game board.

    Parameters
    ----------
    engine: BoardEngine
        The running game

    output: Callable
        Where to write lines
    """
    output(str(engine))


def step(engine: BoardEngine, direction: Direction, output: Callable[[str], None] = print) -> bool:
    """
    Applied a shift into the game.

    Parameters
    ----------
    engine: BoardEngine
        The running game

    direction: Direction
        Direction to apply

    Returns
    -------
    bool
        True if the game is over after the shift
    """
    if direction not in engine.legal_directions():
        output("nothing moves, new tiles only")
    engine.shift(direction)
    redraw(engine, output)

    finished = engine.is_game_over()
    if finished:
        output("terminated!")
    return finished


def key_handler(engine: BoardEngine, key: str, output: Callable[[str], None] = print) -> Optional[bool]:
    """
    Handle one command typed by the player.

    Parameters
    ----------
    engine: BoardEngine
        The running game

    key: str
        Command typed: w/a/s/d, a direction name, r to reset, q to quit

    Returns
    -------
    bool or None
        None to quit, otherwise whether the game is over
    """
    key = key.strip().lower()

    if key == "q":
        return None

    if key == "r":
        engine.reset()
        redraw(engine, output)
        return False

    try:
        direction = KEYS[key] if key in KEYS else Direction.parse(key)
    except InvalidArgumentError as error:
        output(f"invalid command: {error}")
        return False
    return step(engine, direction, output)


def play(engine: BoardEngine, read: Callable[[str], str] = input, output: Callable[[str], None] = print) -> int:
    """
    Run the interactive loop until the player quits or the game is lost.

    Returns
    -------
    int
        The final score.
    """
    redraw(engine, output)
    while True:
        try:
            key = read("move (w/a/s/d, r to reset, q to quit): ")
        except EOFError:
            break
        finished = key_handler(engine, key, output)
        if finished is None or finished:
            break
    return engine.score()


def build_config(argv: Optional[List[str]] = None) -> EngineConfig:
    """
    Read the configuration from the environment, then apply command line overrides.

    Parameters
    ----------
    argv : list of str, optional
        Command line arguments (default is ``sys.argv[1:]``).

    Returns
    -------
    EngineConfig
        The engine configuration.
    """
    parser = ArgumentParser()
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args(argv)
    return EngineConfig.from_env().override(seed=args.seed, log_level=args.log_level)


if __name__ == "__main__":
    engine_config = build_config()
    engine_config.configure_logging()

    game = BoardEngine(config=engine_config)
    print(f"final score: {play(game)}")
