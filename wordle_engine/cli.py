"""
Command-line interface.

Play a round against a fixed word:
    $ wordle-engine --word crane

Play the seeded daily sequence in hard mode with statistics:
    $ wordle-engine --day 5 --seed 42 --difficult --stats

Enter feedback from another game and get recommendations:
    $ wordle-engine --solver-only
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .config import Config, ConfigError, load_config
from .game import Game, GameOptions, stream_reader
from .solver_session import SolverSession
from .state import StateFileError, load_state
from .words import WordListError, WordSets, builtin_word_sets, load_word_sets

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-engine", description="Word-guessing puzzle and solver")
    ap.add_argument("-w", "--word", metavar="WORD", help="answer for a single round")
    ap.add_argument("-r", "--random", action="store_true", help="random answer each round")
    ap.add_argument("-d", "--day", type=int, metavar="N", help="day in the seeded answer order")
    ap.add_argument("-s", "--seed", type=int, metavar="N", help="seed for the answer order")
    ap.add_argument("-D", "--difficult", action="store_true", help="enforce hard-mode guesses")
    ap.add_argument("-t", "--stats", action="store_true", help="print statistics after each round")
    ap.add_argument("-f", "--final-set", metavar="PATH", help="custom list of answer words")
    ap.add_argument("-a", "--acceptable-set", metavar="PATH", help="custom list of guessable words")
    ap.add_argument("-S", "--state", metavar="PATH", help="JSON file to load and save games")
    ap.add_argument("-c", "--config", metavar="PATH", help="JSON config file")
    ap.add_argument("-v", "--solver", action="store_true",
                    help="offer remaining words and recommendations after each guess")
    ap.add_argument("--solver-only", action="store_true", help="run the standalone solver")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    return ap


def merge_options(args: argparse.Namespace, config: Config) -> GameOptions:
    """Command-line values first, then config values."""
    def pick(cli_value, config_value):
        return cli_value if cli_value is not None else config_value

    return GameOptions(
        word=pick(args.word, config.word),
        random=args.random or bool(config.random),
        day=pick(args.day, config.day),
        seed=pick(args.seed, config.seed),
        difficult=args.difficult or bool(config.difficult),
        stats=args.stats or bool(config.stats),
        solver=args.solver,
        state=pick(args.state, config.state),
    )


def load_words_for(args: argparse.Namespace, config: Config) -> WordSets:
    final_path = args.final_set or config.final_set
    acceptable_path = args.acceptable_set or config.acceptable_set
    if not final_path and not acceptable_path:
        return builtin_word_sets()
    if not (final_path and acceptable_path):
        raise ConfigError("--final-set and --acceptable-set must be given together")
    return load_word_sets(final_path, acceptable_path)


def check_options(options: GameOptions, words: WordSets) -> None:
    if options.word and (options.random or options.day is not None or options.seed is not None):
        raise ConfigError("--word cannot be combined with --random, --day or --seed")
    if options.day is not None and not 1 <= options.day <= len(words.final):
        raise ConfigError(f"--day must be between 1 and {len(words.final)}")
    if options.word and options.word.strip().lower() not in words.final:
        raise ConfigError("answer word must be in the final word list")


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    console = Console(soft_wrap=True)
    read_line = stream_reader(sys.stdin)

    try:
        config = load_config(args.config) if args.config else Config()
        words = load_words_for(args, config)

        if args.solver_only:
            SolverSession(words, console, read_line).run()
            return 0

        options = merge_options(args, config)
        check_options(options, words)
        state = load_state(options.state) if options.state else None

        Game(words, options, console, read_line, state=state).run()
    except (ConfigError, WordListError, StateFileError, OSError) as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
