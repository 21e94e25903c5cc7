"""
Terminal rendering.

All user-facing output goes through a rich Console. When the console is
attached to a terminal, guesses and the keyboard are coloured; otherwise
the terse line formats are used so transcripts stay machine readable.
"""

from typing import Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .ranker import Recommendation
from .state import SessionStats

_STYLES = {"G": "bold green", "Y": "bold yellow", "R": "bold red", "X": "white"}

MAX_LISTED_WORDS = 50


def coloured_word(word: str, feedback: str) -> Text:
    """WORD with each letter coloured by its feedback symbol."""
    text = Text()
    for letter, symbol in zip(word.upper(), feedback):
        text.append(letter, style=_STYLES[symbol])
    return text


def print_history(console: Console, history: Sequence[Tuple[str, str]]) -> None:
    line = Text()
    for guess, feedback in history:
        line.append_text(coloured_word(guess, feedback))
        line.append(" ")
    console.print(line)


def print_keyboard(console: Console, keyboard: str) -> None:
    letters = "".join(chr(ord('A') + i) for i in range(26))
    console.print(coloured_word(letters, keyboard))


def print_turn(console: Console, history: Sequence[Tuple[str, str]], keyboard: str) -> None:
    """Show the round so far after an accepted guess."""
    if console.is_terminal:
        print_history(console, history)
        print_keyboard(console, keyboard)
    else:
        console.print(f"{history[-1][1]} {keyboard}", markup=False, highlight=False)


def print_stats(console: Console, stats: SessionStats) -> None:
    tty = console.is_terminal
    if tty:
        console.print("\n[bold]--- game statistics ---[/bold]")
    if not stats.played:
        return

    if tty:
        console.print(f"games played: {stats.played} | success: {stats.successful} "
                      f"| failed: {stats.failed}")
        console.print(f"success rate: {stats.success_rate * 100:.2f}%")
        console.print(f"average tries: {stats.average_attempts:.2f}")
        console.print("[bold]--- most common guesses ---[/bold]")
        for word, count in stats.top_guesses():
            console.print(f"{word.upper()} ({count})", markup=False)
    else:
        console.print(f"{stats.successful} {stats.failed} {stats.average_attempts:.2f}",
                      highlight=False)
        console.print(" ".join(f"{word.upper()} {count}" for word, count in stats.top_guesses()),
                      markup=False, highlight=False)


def print_remaining(console: Console, words: Sequence[str]) -> None:
    console.print("-------------------")
    console.print(f"Possible answers ({len(words)}):")
    if len(words) > MAX_LISTED_WORDS:
        console.print(f"Too many to display (showing first {MAX_LISTED_WORDS}).")
    console.print(", ".join(w.upper() for w in words[:MAX_LISTED_WORDS]), markup=False)


def print_recommendations(console: Console, recommendation: Recommendation) -> None:
    if not recommendation.ranking:
        console.print(f"No recommendations needed. Remaining words: "
                      f"{len(recommendation.candidates)}")
        return

    console.print("-------------------")
    console.print(f"Top {len(recommendation.ranking)} recommended words:")
    for i, (word, entropy) in enumerate(recommendation.ranking, 1):
        console.print(f"{i}. {word.upper()} (score: {entropy:.2f} bits)", markup=False)
