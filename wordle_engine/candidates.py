"""
Candidate reduction: which dictionary words are still consistent with
every piece of feedback recorded so far.
"""

import logging
import numpy as np
from typing import Iterable, List, Sequence, Tuple

from .feedback import compute_feedback_row, pattern_to_int, word_to_chars, words_to_chars

log = logging.getLogger(__name__)


def remaining(acceptable: Iterable[str], history: Sequence[Tuple[str, str]]) -> List[str]:
    """
    Filter the dictionary down to words consistent with the history.

    A word w survives when score(guess, w) == feedback for every
    (guess, feedback) pair. Each pair is an independent filter, so the
    order of history does not matter.

    Args:
        acceptable: Dictionary to filter
        history: (guess, feedback) pairs

    Returns:
        Sorted list of surviving words
    """
    words = sorted({w.lower() for w in acceptable})
    if not words:
        return []

    word_chars = words_to_chars(words)
    mask = np.ones(len(words), dtype=np.bool_)

    for guess, feedback in history:
        row = compute_feedback_row(word_to_chars(guess), word_chars)
        mask &= row == pattern_to_int(feedback)
        log.debug("%s %s -> %d words left", guess, feedback, int(mask.sum()))

    return [words[i] for i in np.flatnonzero(mask)]
