import io

import pytest
from rich.console import Console

from wordle_engine.words import WordSets


@pytest.fixture
def small_words():
    return WordSets(
        final=["crane", "crate", "slate", "trace"],
        acceptable=["brace", "crane", "crate", "craze", "grate", "slate", "trace"],
    )


@pytest.fixture
def console():
    """A non-terminal console whose output can be read back."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
