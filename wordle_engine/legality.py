"""
Guess legality, including the hard-mode constraint.
"""

from collections import Counter
from typing import Container, Sequence, Tuple

from .feedback import WORD_LENGTH


def is_legal(guess: str, hard_mode: bool,
             history: Sequence[Tuple[str, str]],
             acceptable: Container[str]) -> bool:
    """
    Check whether a guess may be played.

    Args:
        guess: The word the player typed
        hard_mode: Enforce previous clues
        history: (guess, feedback) pairs of the current round, oldest first
        acceptable: Words a player may type

    Returns:
        True if the guess is legal
    """
    guess = guess.strip().lower()
    if len(guess) != WORD_LENGTH or guess not in acceptable:
        return False

    if not hard_mode:
        return True

    guess_counts = Counter(guess)

    for past_guess, past_feedback in history:
        past_guess = past_guess.lower()

        # Greens must stay in place
        for i in range(WORD_LENGTH):
            if past_feedback[i] == 'G' and past_guess[i] != guess[i]:
                return False

        # Each turn's yellows must be reused at least as often as they were marked
        required = Counter(
            past_guess[i] for i in range(WORD_LENGTH) if past_feedback[i] == 'Y'
        )
        for letter, n in required.items():
            if guess_counts[letter] < n:
                return False

    return True
