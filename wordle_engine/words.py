"""
Word lists: the built-in final/acceptable sets and validated loading of
custom ones.

Two lists are used:
- final: words that can be the answer
- acceptable: every word a player may guess (includes all final words)
"""

import logging
from pathlib import Path
from typing import List, NamedTuple, Union

from .feedback import WORD_LENGTH

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
BUILTIN_FINAL = DATA_DIR / "final.txt"
BUILTIN_ACCEPTABLE = DATA_DIR / "acceptable.txt"


class WordListError(ValueError):
    """A word list breaks one of the dictionary invariants."""


class WordSets(NamedTuple):
    final: List[str]
    acceptable: List[str]


def load_words(filepath: Union[str, Path]) -> List[str]:
    """Load word list from file (one word per line, lowercased)."""
    with open(filepath, 'r') as f:
        return [line.strip().lower() for line in f]


def validate_words(words: List[str], name: str) -> List[str]:
    """
    Check a word list and return it sorted.

    Raises:
        WordListError: duplicate, wrong length or non-alphabetic word
    """
    seen = set()
    for word in words:
        if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha()):
            raise WordListError(f"{name}: invalid word {word!r}")
        if word in seen:
            raise WordListError(f"{name}: duplicate word {word!r}")
        seen.add(word)
    return sorted(words)


def load_word_sets(final_path: Union[str, Path],
                   acceptable_path: Union[str, Path]) -> WordSets:
    """
    Load and validate a final/acceptable pair of word lists.

    Raises:
        WordListError: a list is malformed, or final is not a subset of acceptable
        OSError: a file cannot be read
    """
    final = validate_words(load_words(final_path), "final set")
    acceptable = validate_words(load_words(acceptable_path), "acceptable set")

    missing = set(final) - set(acceptable)
    if missing:
        raise WordListError(
            f"final set is not a subset of acceptable set "
            f"({len(missing)} missing, e.g. {min(missing)!r})"
        )

    log.info("Loaded %d final and %d acceptable words", len(final), len(acceptable))
    return WordSets(final, acceptable)


def builtin_word_sets() -> WordSets:
    """The word lists shipped with the package."""
    return load_word_sets(BUILTIN_FINAL, BUILTIN_ACCEPTABLE)
