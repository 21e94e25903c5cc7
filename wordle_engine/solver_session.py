"""
Standalone solver session.

The player types each guess with the feedback the puzzle showed, e.g.
``crane RGYRR``; the session narrows the candidates and recommends the
next guess. Commands:

    rec     recommend guesses for the current state
    left    list the remaining candidates
    win     the puzzle was solved
    quit    leave
"""

import logging
from typing import List, Tuple

from rich.console import Console

from .candidates import remaining
from .feedback import WORD_LENGTH, parse_feedback
from .game import LineReader
from .ranker import recommend
from .render import print_recommendations, print_remaining
from .words import WordSets

log = logging.getLogger(__name__)

OPENING_GUESS = "aeros"


class SolverSession:

    def __init__(self, words: WordSets, console: Console, read_line: LineReader):
        self.acceptable = words.acceptable
        self.acceptable_set = set(words.acceptable)
        self.console = console
        self.read_line = read_line
        self.history: List[Tuple[str, str]] = []
        self.done = False

    def greet(self) -> None:
        c = self.console
        c.print("[bold green]Welcome to the solver![/bold green]")
        c.print("After each turn enter your guess and the feedback it got.")
        c.print("Example: 'crane GGYRR' (G: green, Y: yellow, R: grey)")
        c.print("Type 'rec' for recommendations, 'left' for the remaining words, "
                "'win' if you solved it, or 'quit' to exit.")
        if OPENING_GUESS in self.acceptable_set:
            c.print(f"\nSuggested opening guess: [bold green]{OPENING_GUESS.upper()}[/bold green]")

    def handle(self, line: str) -> None:
        """Dispatch one line of input."""
        command = line.strip().lower()

        if command == "quit":
            self.console.print("Exiting solver.")
            self.done = True
        elif command == "win":
            self.console.print("[bold green]Congratulations![/bold green]")
            self.done = True
        elif command == "rec":
            print_recommendations(self.console, recommend(self.acceptable, self.history))
        elif command == "left":
            print_remaining(self.console, remaining(self.acceptable, self.history))
        else:
            self.add_turn(command)

    def add_turn(self, entry: str) -> None:
        parts = entry.split()
        if len(parts) != 2:
            self.console.print("[red]Invalid input. Use 'guess feedback'.[/red]")
            return

        guess = parts[0]
        if len(guess) != WORD_LENGTH or not (guess.isascii() and guess.isalpha()):
            self.console.print(f"[red]Guess must be {WORD_LENGTH} letters.[/red]")
            return
        try:
            feedback = parse_feedback(parts[1])
        except ValueError as e:
            self.console.print(str(e), style="red", markup=False)
            return

        if guess not in self.acceptable_set:
            self.console.print("[yellow]Warning: this guess is not in the word list.[/yellow]")

        self.history.append((guess, feedback))
        result = recommend(self.acceptable, self.history)

        if len(result.candidates) == 1:
            self.console.print("\n[green]Found the answer! The word is:[/green]")
            self.console.print(f"[bold green]{result.candidates[0].upper()}[/bold green]")
            self.done = True
        elif not result.candidates:
            self.console.print("\n[red]No possible words match these inputs. "
                               "Please check your entries![/red]")
            self.done = True
        else:
            self.console.print(f"\n{len(result.candidates)} possible words remain.")
            print_recommendations(self.console, result)

    def run(self) -> None:
        self.greet()
        while not self.done:
            self.console.print(f"\n[{len(self.history) + 1}] Enter guess and feedback: ",
                               end="", markup=False)
            line = self.read_line()
            if line is None:
                log.debug("Input ended, leaving solver")
                return
            self.handle(line)
