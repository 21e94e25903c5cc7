"""
Feedback Scoring
================

Scores a guess against an answer the way the puzzle does.

Feedback is a 5-character string over:
- G: Correct (right letter, right position)
- Y: Present (right letter, wrong position, within multiplicity limits)
- R: Absent

Internally the same feedback is an integer pattern code 0-242
(little-endian base 3, R=0, Y=1, G=2), which is what the numba kernels
produce and what the ranker partitions on.
"""

import numpy as np
from numba import jit
from typing import Iterable


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5

ABSENT = 0
PRESENT = 1
CORRECT = 2
N_PATTERNS = 243  # 3^5 possible feedback patterns

SYMBOLS = "RYG"
SOLVED = "GGGGG"

# Alternative spellings accepted when parsing typed feedback
_SYMBOL_ALIASES = {
    "G": CORRECT, "2": CORRECT,
    "Y": PRESENT, "1": PRESENT,
    "R": ABSENT, "B": ABSENT, "X": ABSENT, ".": ABSENT, "0": ABSENT,
}


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(26, dtype=np.int32)

    # Count letters in answer
    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: mark greens
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 2  # CORRECT
            answer_counts[guess[i]] -= 1

    # Second pass: mark yellows
    for i in range(5):
        if feedback[i] == 0:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = 1  # PRESENT
                answer_counts[c] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, cache=True)
def compute_feedback_row(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Feedback of one guess against every answer in answer_chars."""
    n_answers = answer_chars.shape[0]
    result = np.zeros(n_answers, dtype=np.uint8)
    for j in range(n_answers):
        result[j] = compute_feedback(guess, answer_chars[j])
    return result


# ============================================================================
# WORD / PATTERN CONVERSION
# ============================================================================

def word_to_chars(word: str) -> np.ndarray:
    """Convert one word to a (5,) char code array."""
    return np.array([ord(c) - ord('a') for c in word.lower()], dtype=np.int32)


def words_to_chars(words: Iterable[str]) -> np.ndarray:
    """Convert words to an (n, 5) char code array."""
    words = list(words)
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w.lower()):
            arr[i, j] = ord(c) - ord('a')
    return arr


def pattern_to_int(pattern: str) -> int:
    """Convert a feedback string (e.g. 'RRYGG') to its pattern code."""
    result = 0
    multiplier = 1
    for c in pattern:
        result += SYMBOLS.index(c) * multiplier
        multiplier *= 3
    return result


def int_to_pattern(n: int) -> str:
    """Convert a pattern code (0-242) to its feedback string."""
    chars = []
    for _ in range(WORD_LENGTH):
        n, val = divmod(int(n), 3)
        chars.append(SYMBOLS[val])
    return ''.join(chars)


def parse_feedback(text: str) -> str:
    """
    Normalise typed feedback to the canonical G/Y/R string.

    Accepts:
        - 'GYRRG' (also B, X or . for absent)
        - '21002' (digits 0/1/2)

    Raises:
        ValueError: wrong length or unknown symbol
    """
    text = text.strip().upper().replace(" ", "")
    if len(text) != WORD_LENGTH:
        raise ValueError(f"Feedback must have exactly {WORD_LENGTH} symbols, got {text!r}")

    out = []
    for ch in text:
        if ch not in _SYMBOL_ALIASES:
            raise ValueError(f"Bad feedback symbol: {ch!r}")
        out.append(SYMBOLS[_SYMBOL_ALIASES[ch]])
    return ''.join(out)


# ============================================================================
# PUBLIC API
# ============================================================================

def score(guess: str, answer: str) -> str:
    """
    Score a guess against an answer.

    Both words must already be valid 5-letter words; case is ignored.

    >>> score("trace", "crane")
    'RGGYG'
    """
    code = compute_feedback(word_to_chars(guess), word_to_chars(answer))
    return int_to_pattern(code)


def is_solved(feedback: str) -> bool:
    return feedback == SOLVED
