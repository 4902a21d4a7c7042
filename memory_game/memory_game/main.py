"""Main entry point: play the memory game in a terminal."""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from memory_game.config import GameLogConfig, load_config
from memory_game.game import GameController, InvalidConfig
from memory_game.logging import GameLogger
from memory_game.utils.logger import GameDisplay, setup_logging
from memory_game.utils.scheduler import ManualScheduler

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
RESTART_COMMANDS = {"r", "restart"}


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Format: {ISO timestamp}_memory.jsonl
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_memory.jsonl")


def parse_selection(line: str) -> list[int] | None:
    """Parse card numbers from an input line.

    Returns:
        List of card ids, or None if the line is not a list of integers
    """
    try:
        return [int(token) for token in line.replace(",", " ").split()]
    except ValueError:
        return None


def run_session(
    controller: GameController,
    scheduler: ManualScheduler,
    display: GameDisplay,
    read_line: Callable[[str], str] = input,
    now: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run the interactive loop until the player quits.

    The virtual scheduler is advanced by the wall-clock time spent waiting
    for input, and by the adjudication delay after each completed pair, so
    the clock and the board follow real time.

    Returns:
        Number of completed games
    """
    controller.set_callbacks(
        on_deck_built=lambda cards: display.print_separator(),
        on_match=display.print_match,
        on_no_match=display.print_no_match,
        on_game_over=display.print_game_over,
    )
    delay = controller.config.adjudication_delay

    display.print_help()
    controller.begin()
    last = now()

    while True:
        display.print_board(controller.cards)
        display.print_stats(controller.stats)
        try:
            line = read_line("> ").strip().lower()
        except EOFError:
            break

        current = now()
        scheduler.advance(max(0.0, current - last))
        last = current

        if line in QUIT_COMMANDS:
            break
        if line in RESTART_COMMANDS:
            controller.on_restart_requested()
            continue
        if not line:
            continue

        card_ids = parse_selection(line)
        if card_ids is None:
            display.print_help()
            continue

        for card_id in card_ids:
            if not controller.on_card_selected(card_id):
                logger.debug(f"Card {card_id} cannot be selected now")
            if controller.arbiter.is_full():
                display.print_board(controller.cards)
                sleep(delay)
                scheduler.advance(delay)
                last = now()

        if controller.is_over:
            try:
                answer = read_line("Play again? [y/N] ").strip().lower()
            except EOFError:
                break
            if answer not in ("y", "yes"):
                break
            controller.on_restart_requested()
            last = now()

    return controller.games_completed


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Matching-pairs memory card game")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid config file {args.config}: {e}")
        return 1

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"

    setup_logging(config.logging.level)

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    if args.game_log is not None:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = GameLogConfig(
            enabled=game_log_enabled, output_path=config.game_log.output_path
        )

    display = GameDisplay(max_stars=config.game.max_stars)
    scheduler = ManualScheduler()

    try:
        with GameLogger(game_log_config) as game_logger:
            controller = GameController(
                config.game, scheduler=scheduler, game_logger=game_logger
            )
            if game_log_enabled:
                print(f"Game log: {game_log_config.output_path}")
            game_logger.log_session_start(len(controller.deck), config.game.max_stars)

            completed = run_session(controller, scheduler, display)

            game_logger.log_session_end(controller.games_played, completed)
        return 0

    except InvalidConfig as e:
        logger.error(f"Cannot build deck: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
