"""
Round driver
============

Runs the interactive game around the core: picks answers, reads guesses,
gates them through the legality checker, scores them, keeps the keyboard
state, and records finished games and statistics.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from rich.console import Console

from .candidates import remaining
from .feedback import is_solved, score
from .legality import is_legal
from .ranker import recommend
from .render import print_recommendations, print_remaining, print_stats, print_turn
from .state import GameRecord, GameState, SessionStats, save_state
from .words import WordSets

log = logging.getLogger(__name__)

MAX_GUESSES = 6

# Keyboard letter states, weakest first
KEYBOARD_RANK = "XRYG"
UNKNOWN_KEYBOARD = "X" * 26

# Returns the next input line without its newline, or None at end of input
LineReader = Callable[[], Optional[str]]


def stream_reader(stream) -> LineReader:
    def read() -> Optional[str]:
        line = stream.readline()
        return line.rstrip("\n") if line else None
    return read


def update_keyboard(keyboard: str, guess: str, feedback: str) -> str:
    """Upgrade each guessed letter to the best state seen; never downgrade."""
    keys = list(keyboard)
    for letter, symbol in zip(guess.upper(), feedback):
        i = ord(letter) - ord('A')
        if KEYBOARD_RANK.index(symbol) > KEYBOARD_RANK.index(keys[i]):
            keys[i] = symbol
    return "".join(keys)


def answer_for_day(final: List[str], day: int, seed: int) -> str:
    """The answer for a 1-based day in the seeded shuffle of the final list."""
    if not 1 <= day <= len(final):
        raise ValueError(f"day must be between 1 and {len(final)}, got {day}")
    order = sorted(final)
    random.Random(seed).shuffle(order)
    return order[day - 1]


class Round:
    """One secret word and the guesses made against it."""

    def __init__(self, answer: str, acceptable, hard_mode: bool = False):
        self.answer = answer.lower()
        self.acceptable = acceptable
        self.hard_mode = hard_mode
        self.history: List[Tuple[str, str]] = []
        self.keyboard = UNKNOWN_KEYBOARD

    @property
    def guesses(self) -> List[str]:
        return [g for g, _ in self.history]

    @property
    def solved(self) -> bool:
        return bool(self.history) and is_solved(self.history[-1][1])

    @property
    def over(self) -> bool:
        return self.solved or len(self.history) >= MAX_GUESSES

    def submit(self, guess: str) -> Optional[str]:
        """
        Play a guess.

        Returns:
            The feedback, or None if the guess is illegal
        """
        guess = guess.strip().lower()
        if not is_legal(guess, self.hard_mode, self.history, self.acceptable):
            return None
        feedback = score(guess, self.answer)
        self.history.append((guess, feedback))
        self.keyboard = update_keyboard(self.keyboard, guess, feedback)
        return feedback


@dataclass
class GameOptions:
    word: Optional[str] = None
    random: bool = False
    day: Optional[int] = None
    seed: Optional[int] = None
    difficult: bool = False
    stats: bool = False
    solver: bool = False
    state: Optional[str] = None


class Game:
    """A play session: one or more rounds plus their statistics."""

    def __init__(self, words: WordSets, options: GameOptions, console: Console,
                 read_line: LineReader, state: Optional[GameState] = None,
                 rng: Optional[random.Random] = None):
        self.words = words
        self.acceptable = set(words.acceptable)
        self.options = options
        self.console = console
        self.read_line = read_line
        self.rng = rng or random.Random()

        self.games: List[GameRecord] = list(state.games) if state else []
        self.stats = SessionStats.from_games(self.games)
        self.played_answers: List[str] = []
        self.day = options.day or 1
        self.seed = options.seed if options.seed is not None else 1

    @property
    def tty(self) -> bool:
        return self.console.is_terminal

    def _prompt(self, message: str) -> Optional[str]:
        if self.tty:
            self.console.print(message, end="", markup=False)
        return self.read_line()

    # ------------------------------------------------------------------
    # Answer selection
    # ------------------------------------------------------------------

    def next_answer(self) -> Optional[str]:
        """The answer for the coming round, or None to end the session."""
        if self.options.word:
            return self.options.word.strip().lower()
        if self.options.day is not None or self.options.seed is not None:
            return answer_for_day(self.words.final, self.day, self.seed)
        if self.options.random:
            unplayed = [w for w in self.words.final if w not in self.played_answers]
            if not unplayed:
                self.console.print("Every answer has been played.")
                return None
            answer = self.rng.choice(unplayed)
            self.played_answers.append(answer)
            return answer

        final = set(self.words.final)
        while True:
            line = self._prompt("\nPlease input the answer: ")
            if line is None or not line.strip():
                return None
            answer = line.strip().lower()
            if answer in final:
                return answer
            self.console.print("INVALID", markup=False)

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def play_round(self, answer: str) -> Optional[Round]:
        """
        Read guesses until the round is over.

        Returns:
            The finished round, or None if input ran out mid-round
        """
        rnd = Round(answer, self.acceptable, hard_mode=self.options.difficult)

        while not rnd.over:
            line = self._prompt(f"Your guess ({len(rnd.history) + 1}): ")
            if line is None:
                return None

            feedback = rnd.submit(line)
            if feedback is None:
                self.console.print("INVALID", markup=False)
                continue
            self.stats.count_guess(rnd.history[-1][0])
            print_turn(self.console, rnd.history, rnd.keyboard)

            if not rnd.over and self.options.solver:
                self.solver_assist(rnd)

        attempts = len(rnd.history)
        if rnd.solved:
            if self.tty:
                self.console.print(f"\n[bold green]You got it![/bold green] "
                                   f"The answer is {answer.upper()}")
            self.console.print(f"CORRECT {attempts}", highlight=False)
        else:
            if self.tty:
                self.console.print(f"\n[bold red]Out of guesses.[/bold red] "
                                   f"The answer is {answer.upper()}")
            self.console.print(f"FAILED {answer.upper()}", highlight=False)
        self.stats.record_result(rnd.solved, attempts)
        return rnd

    def solver_assist(self, rnd: Round) -> None:
        """Offer the remaining-word list and recommendations after a guess."""
        self.console.print("Solver mode: type 'left' for remaining words, "
                           "'rec' for recommended words")
        request = (self.read_line() or "").strip().upper()
        if "LEFT" in request:
            print_remaining(self.console, remaining(self.words.acceptable, rnd.history))
        if "REC" in request:
            print_recommendations(self.console, recommend(self.words.acceptable, rnd.history))

    def finish_round(self, rnd: Round) -> None:
        self.games.append(GameRecord(
            answer=rnd.answer.upper(),
            guesses=[g.upper() for g in rnd.guesses],
        ))
        if self.options.state:
            state = GameState(total_rounds=len(self.games), games=self.games)
            try:
                save_state(Path(self.options.state), state)
            except OSError as e:
                log.error("Error saving game state: %s", e)
        if self.options.stats:
            print_stats(self.console, self.stats)

    def run(self) -> None:
        while True:
            answer = self.next_answer()
            if answer is None:
                return

            rnd = self.play_round(answer)
            if rnd is None:
                return
            self.finish_round(rnd)

            if self.options.word:
                return
            self.day += 1
            if self.options.day is not None or self.options.seed is not None:
                if self.day > len(self.words.final):
                    return

            choice = self._prompt("\nPlay again? (Y/N) ")
            if choice is None or choice.strip().lower() != "y":
                return
