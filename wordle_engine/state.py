"""
Play history persistence and session statistics.

State file format (JSON):

    {
        "total_rounds": 2,
        "games": [
            {"answer": "CRANE", "guesses": ["SLATE", "CRANE"]},
            {"answer": "PAUSE", "guesses": ["LEPER", ...]}
        ]
    }
"""

import json
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .feedback import WORD_LENGTH, is_solved, score


class StateFileError(ValueError):
    """A state file exists but does not hold a valid game state."""


@dataclass
class GameRecord:
    answer: str = ""
    guesses: List[str] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return bool(self.guesses) and is_solved(score(self.guesses[-1], self.answer))


@dataclass
class GameState:
    total_rounds: int = 0
    games: List[GameRecord] = field(default_factory=list)


def _check_word(word, what: str) -> str:
    if not (isinstance(word, str) and len(word) == WORD_LENGTH
            and word.isascii() and word.isalpha()):
        raise StateFileError(f"invalid {what} in state file: {word!r}")
    return word


def _parse_state(data) -> GameState:
    if not isinstance(data, dict):
        raise StateFileError("state file must contain a JSON object")

    games = []
    for raw in data.get("games", []):
        if not isinstance(raw, dict):
            raise StateFileError(f"invalid game record: {raw!r}")
        guesses = raw.get("guesses", [])
        if not isinstance(guesses, list):
            raise StateFileError(f"invalid guesses in game record: {guesses!r}")
        games.append(GameRecord(
            answer=_check_word(raw.get("answer", ""), "answer"),
            guesses=[_check_word(g, "guess") for g in guesses],
        ))

    total_rounds = data.get("total_rounds", 0)
    if not isinstance(total_rounds, int) or isinstance(total_rounds, bool):
        raise StateFileError(f"invalid total_rounds: {total_rounds!r}")
    return GameState(total_rounds=total_rounds, games=games)


def load_state(path: Union[str, Path]) -> Optional[GameState]:
    """
    Read a state file.

    Returns:
        The saved state, or None if the file cannot be read

    Raises:
        StateFileError: the file is not a valid state
    """
    try:
        text = Path(path).read_text()
    except OSError:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateFileError(f"error parsing state file {path}: {e}") from e
    return _parse_state(data)


def save_state(path: Union[str, Path], state: GameState) -> None:
    Path(path).write_text(json.dumps(asdict(state), indent=2))


# ============================================================================
# SESSION STATISTICS
# ============================================================================

@dataclass
class SessionStats:
    """Counters for the games played in a session (and any restored ones)."""
    successful: int = 0
    failed: int = 0
    total_successful_attempts: int = 0
    guess_frequency: Counter = field(default_factory=Counter)

    @property
    def played(self) -> int:
        return self.successful + self.failed

    @property
    def success_rate(self) -> float:
        return self.successful / self.played if self.played else 0.0

    @property
    def average_attempts(self) -> float:
        if not self.successful:
            return 0.0
        return self.total_successful_attempts / self.successful

    def count_guess(self, guess: str) -> None:
        self.guess_frequency[guess.lower()] += 1

    def record_result(self, won: bool, attempts: int) -> None:
        if won:
            self.successful += 1
            self.total_successful_attempts += attempts
        else:
            self.failed += 1

    def top_guesses(self, n: int = 5) -> List[Tuple[str, int]]:
        """Most frequent guesses, ties in word order."""
        return sorted(self.guess_frequency.items(), key=lambda wc: (-wc[1], wc[0]))[:n]

    @classmethod
    def from_games(cls, games: List[GameRecord]) -> "SessionStats":
        stats = cls()
        for record in games:
            stats.record_result(record.won, len(record.guesses))
            for guess in record.guesses:
                stats.count_guess(guess)
        return stats
