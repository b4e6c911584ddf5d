# -*- coding: utf-8 -*-
"""
Play batches of 2048 games with a random policy and report the reached tiles.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Dict, List, Optional, Tuple

from numpy.random import Generator, default_rng
from tqdm import trange

from board2048 import BoardEngine, Direction, EngineConfig

_logger = logging.getLogger(__name__)


def choose_direction(engine: BoardEngine, generator: Generator) -> Direction:
    """
    Pick a random direction, preferring the ones that move tiles.

    Parameters
    ----------
    engine : BoardEngine
        The running game.
    generator : Generator
        Random generator of the policy.

    Returns
    -------
    Direction
        The chosen direction.
    """
    candidates = engine.legal_directions() or list(Direction)
    return candidates[int(generator.integers(len(candidates)))]


def play_game(engine: BoardEngine, generator: Generator, max_moves: int | None = None) -> int:
    """
    Play one game until it is lost.

    Returns
    -------
    int
        The number of shifts played.
    """
    moves = 0
    while not engine.is_game_over():
        if max_moves is not None and moves >= max_moves:
            _logger.warning('Game stopped after %d moves', moves)
            break
        engine.shift(choose_direction(engine, generator))
        moves += 1
    return moves


def evaluate(games: int = 10, config: EngineConfig | None = None) -> Dict[str, object]:
    """
    Evaluate the random policy.

    Parameters
    ----------
    games : int, optional
        The number of games to play (default is 10).
    config : EngineConfig, optional
        Configuration of the engine; its seed also seeds the policy.

    Returns
    -------
    Dict[str, object]
        ``frequency`` of the final max tile and ``best_score``.
    """
    config = config if config is not None else EngineConfig()
    engine = BoardEngine(config=config)
    policy = default_rng(config.seed)

    max_tiles, best_score = [], 0

    with trange(games) as period:
        for num in period:
            if num:
                engine.reset()

            # ##: Play a game.
            moves = play_game(engine, policy)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=engine.score(), max=engine.max_tile)
            _logger.debug('Game %d: moves=%d, score=%d, max=%d', num + 1, moves, engine.score(), engine.max_tile)

            # ##: Save max cells.
            max_tiles.append(engine.max_tile)
            best_score = max(best_score, engine.score())

    # ##: Final log.
    return {'frequency': dict(Counter(max_tiles)), 'best_score': best_score}


def build_config(argv: Optional[List[str]] = None) -> Tuple[EngineConfig, int]:
    """
    Read the configuration from the environment, then apply command line overrides.

    Parameters
    ----------
    argv : list of str, optional
        Command line arguments (default is ``sys.argv[1:]``).

    Returns
    -------
    Tuple[EngineConfig, int]
        The engine configuration and the number of games to play.
    """
    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args(argv)

    config = EngineConfig.from_env().override(seed=args.seed, log_level=args.log_level)
    return config, args.games


if __name__ == "__main__":
    engine_config, number_games = build_config()
    engine_config.configure_logging()

    result = evaluate(games=number_games, config=engine_config)
    print(f"Random policy, max tiles: {result['frequency']}, best score: {result['best_score']}")
