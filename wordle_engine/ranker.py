"""
Recommendation Ranker
=====================

Ranks next guesses by how evenly they split the remaining candidates.

For a guess g, every candidate answer c lands in the partition keyed by
the feedback score(g, c). The guess's score is the Shannon entropy (bits)
of the partition-size distribution: the more even the split, the more
information the guess is expected to reveal. The best possible score for
n candidates is log2(n).
"""

import logging
import numpy as np
from numba import jit, prange
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from .candidates import remaining
from .feedback import N_PATTERNS, compute_feedback, words_to_chars

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

# Up to this many candidates, only words that could still be the answer are
# considered as guesses. Above it, the whole acceptable dictionary is searched.
SEARCH_POOL_THRESHOLD = 500
DEFAULT_TOP_K = 5


# ============================================================================
# NUMBA FUNCTIONS
# ============================================================================

@jit(nopython=True, cache=True)
def get_partition_sizes(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Count how many candidates fall into each feedback partition."""
    sizes = np.zeros(N_PATTERNS, dtype=np.int32)
    for j in range(answer_chars.shape[0]):
        sizes[compute_feedback(guess, answer_chars[j])] += 1
    return sizes


@jit(nopython=True, cache=True)
def compute_entropy(sizes: np.ndarray, total: int) -> float:
    """
    Compute Shannon entropy of a partition distribution.

    Sizes are summed smallest first so that two guesses with the same
    partition shape get bit-identical scores.
    """
    if total == 0:
        return 0.0

    entropy = 0.0
    for s in np.sort(sizes):
        if s > 0:
            p = s / total
            entropy -= p * np.log2(p)

    return entropy


@jit(nopython=True, parallel=True, cache=True)
def compute_entropies(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Entropy score of every guess against the same candidate set.

    Args:
        guess_chars: shape (n_guesses, 5) search pool
        answer_chars: shape (n_answers, 5) candidate answers

    Returns:
        shape (n_guesses,) entropies in bits
    """
    n_guesses = guess_chars.shape[0]
    total = answer_chars.shape[0]
    result = np.zeros(n_guesses, dtype=np.float64)

    for i in prange(n_guesses):
        sizes = get_partition_sizes(guess_chars[i], answer_chars)
        result[i] = compute_entropy(sizes, total)

    return result


# ============================================================================
# PUBLIC API
# ============================================================================

class Recommendation(NamedTuple):
    """Result of a recommendation request."""
    candidates: List[str]
    ranking: List[Tuple[str, float]]


def select_search_pool(candidates: Sequence[str], acceptable: Iterable[str]) -> List[str]:
    """Pick the words to evaluate as guesses for this candidate set."""
    if len(candidates) <= SEARCH_POOL_THRESHOLD:
        return list(candidates)
    return sorted(acceptable)


def top_k(candidates: Sequence[str], search_pool: Sequence[str],
          k: int = DEFAULT_TOP_K) -> List[Tuple[str, float]]:
    """
    Rank search-pool words by entropy over the candidate set.

    Args:
        candidates: Words that could still be the answer
        search_pool: Words to evaluate as guesses
        k: Maximum number of results

    Returns:
        Up to k (word, entropy) pairs, best first; ties in ascending word order
    """
    if not candidates or not search_pool or k <= 0:
        return []

    pool = [w.lower() for w in search_pool]
    log.debug("Scoring %d guesses against %d candidates", len(pool), len(candidates))

    scores = compute_entropies(words_to_chars(pool), words_to_chars(candidates))
    ranked = sorted(zip(pool, scores.tolist()), key=lambda ws: (-ws[1], ws[0]))
    return ranked[:k]


def recommend(acceptable: Iterable[str], history: Sequence[Tuple[str, str]],
              k: int = DEFAULT_TOP_K) -> Recommendation:
    """
    Reduce the dictionary by the history and rank the next guesses.

    When at most one candidate is left there is nothing to rank and the
    ranking comes back empty.
    """
    acceptable = sorted(acceptable)
    candidates = remaining(acceptable, history)
    if len(candidates) <= 1:
        return Recommendation(candidates, [])

    pool = select_search_pool(candidates, acceptable)
    return Recommendation(candidates, top_k(candidates, pool, k))
