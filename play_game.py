"""
Command-line entry point: run one simulated game between random agents.
"""

import argparse
import logging
from typing import List, Optional

from config_parser import ConfigError, DEFAULT_MAX_ROUNDS, SimulationConfig, read_max_turns
from simulator import Simulator, SimulationResult

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a game of Catan between random agents")
    parser.add_argument("config", nargs="?", default=None,
                        help="Config file containing 'turns: <int>'")
    parser.add_argument("--rounds", type=int, default=None,
                        help="Round limit (overrides the config file)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the board, dice and agents")
    parser.add_argument("--plot", type=str, default=None,
                        help="Save an image of the final board to this path")
    parser.add_argument("--verbose", action="store_true",
                        help="Log engine decisions as well as game actions")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log warnings and errors")
    return parser


def resolve_max_rounds(args: argparse.Namespace) -> int:
    if args.rounds is not None:
        return args.rounds
    if args.config is None:
        return DEFAULT_MAX_ROUNDS
    try:
        return read_max_turns(args.config)
    except ConfigError as e:
        logger.warning("%s - using default max rounds (%d)", e, DEFAULT_MAX_ROUNDS)
        return DEFAULT_MAX_ROUNDS


def play_game(config: SimulationConfig, plot_path: Optional[str] = None) -> SimulationResult:
    simulator = Simulator(config)
    result = simulator.run()

    if plot_path:
        # matplotlib is only needed when a plot is requested
        from game_visualization import save_board_image
        save_board_image(simulator.board, plot_path)
        logger.info("Saved board image to %s", plot_path)

    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")

    try:
        config = SimulationConfig(max_rounds=resolve_max_rounds(args), random_seed=args.seed)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    result = play_game(config, plot_path=args.plot)
    if result.winner_id is not None:
        print(f"Winner: Player {result.winner_id}")
    else:
        print("No winner (max rounds reached)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
