"""
Wordle Engine - Feedback, Legality and Entropy-Ranked Solving
=============================================================

Scores guesses against a secret 5-letter word, enforces hard mode, narrows
the candidate words, and ranks next guesses by expected information gain.
"""

__version__ = "1.0.0"

from .feedback import score, parse_feedback, is_solved
from .legality import is_legal
from .candidates import remaining
from .ranker import top_k, select_search_pool, recommend, Recommendation
from .words import WordSets, WordListError, load_word_sets, builtin_word_sets
