import io
import random

import pytest

from wordle_engine.game import (
    UNKNOWN_KEYBOARD, Game, GameOptions, Round, answer_for_day, stream_reader, update_keyboard,
)
from wordle_engine.state import GameRecord, GameState, load_state


def kb(**states):
    keys = list(UNKNOWN_KEYBOARD)
    for letter, state in states.items():
        keys[ord(letter) - ord("A")] = state
    return "".join(keys)


def output_lines(console):
    return console.file.getvalue().splitlines()


def make_game(words, console, text, **options):
    return Game(words, GameOptions(**options), console, stream_reader(io.StringIO(text)),
                rng=random.Random(0))


# ----------------------------------------------------------------------------
# Keyboard and answer order
# ----------------------------------------------------------------------------

def test_keyboard_upgrades():
    keyboard = update_keyboard(UNKNOWN_KEYBOARD, "trace", "RGGYG")
    assert keyboard == kb(T="R", R="G", A="G", C="Y", E="G")
    keyboard = update_keyboard(keyboard, "crane", "GGGGG")
    assert keyboard == kb(T="R", R="G", A="G", C="G", E="G", N="G")


def test_keyboard_never_downgrades():
    keyboard = update_keyboard(kb(E="G", I="Y"), "eerie", "YYRRR")
    assert keyboard == kb(E="G", I="Y", R="R")


def test_answer_for_day_is_a_permutation(small_words):
    final = small_words.final
    answers = [answer_for_day(final, day, 42) for day in range(1, len(final) + 1)]
    assert sorted(answers) == sorted(final)
    assert answer_for_day(final, 1, 42) == answers[0]


@pytest.mark.parametrize("day", [0, 5])
def test_answer_for_day_out_of_range(small_words, day):
    with pytest.raises(ValueError):
        answer_for_day(small_words.final, day, 1)


# ----------------------------------------------------------------------------
# Round
# ----------------------------------------------------------------------------

def test_round_rejects_illegal_guess(small_words):
    rnd = Round("crane", set(small_words.acceptable))
    assert rnd.submit("zzzzz") is None
    assert rnd.history == []
    assert rnd.submit(" TRACE ") == "RGGYG"
    assert rnd.submit("crane") == "GGGGG"
    assert rnd.solved and rnd.over
    assert rnd.guesses == ["trace", "crane"]


def test_round_ends_after_six_guesses(small_words):
    rnd = Round("crane", set(small_words.acceptable))
    for _ in range(6):
        assert rnd.submit("slate") == "RRGRG"
    assert rnd.over and not rnd.solved


# ----------------------------------------------------------------------------
# Game transcripts
# ----------------------------------------------------------------------------

def test_plain_transcript(small_words, console):
    make_game(small_words, console, "xxxxx\ntrace\ncrane\n", word="crane").run()
    assert output_lines(console) == [
        "INVALID",
        "RGGYG " + kb(T="R", R="G", A="G", C="Y", E="G"),
        "GGGGG " + kb(T="R", R="G", A="G", C="G", E="G", N="G"),
        "CORRECT 2",
    ]


def test_failed_round(small_words, console):
    make_game(small_words, console, "slate\n" * 6, word="crane").run()
    lines = output_lines(console)
    assert len([l for l in lines if l.startswith("RRGRG ")]) == 6
    assert lines[-1] == "FAILED CRANE"


def test_hard_mode(small_words, console):
    make_game(small_words, console, "crane\ngrate\ncraze\ncrate\n",
              word="crate", difficult=True).run()
    lines = output_lines(console)
    assert [l.split()[0] for l in lines] == ["GGGRG", "INVALID", "GGGRG", "GGGGG", "CORRECT"]
    assert lines[-1] == "CORRECT 3"


def test_solver_assist_lists_remaining(small_words, console):
    make_game(small_words, console, "slate\nleft\ncrane\n", word="crane", solver=True).run()
    lines = output_lines(console)
    assert "Possible answers (3):" in lines
    assert "BRACE, CRANE, CRAZE" in lines
    assert lines[-1] == "CORRECT 2"


def test_solver_assist_recommends(small_words, console):
    make_game(small_words, console, "slate\nrec\ncrane\n", word="crane", solver=True).run()
    lines = output_lines(console)
    assert "Top 3 recommended words:" in lines
    assert any(l.startswith("1. CRANE") for l in lines)
    assert any(l.startswith("3. BRACE") for l in lines)


def test_state_saved_and_stats_printed(small_words, console, tmp_path):
    path = tmp_path / "state.json"
    game = make_game(small_words, console, "trace\ncrane\n",
                     word="crane", stats=True, state=str(path))
    game.run()

    assert load_state(path) == GameState(
        total_rounds=1, games=[GameRecord(answer="CRANE", guesses=["TRACE", "CRANE"])])
    assert output_lines(console)[-2:] == ["1 0 2.00", "CRANE 1 TRACE 1"]


def test_input_ends_mid_round(small_words, console, tmp_path):
    path = tmp_path / "state.json"
    game = make_game(small_words, console, "slate\n", word="crane", state=str(path))
    game.run()
    assert game.games == []
    assert not path.exists()


def test_restored_games_count_in_stats(small_words, console):
    state = GameState(total_rounds=1, games=[GameRecord(answer="CRANE", guesses=["SLATE"])])
    game = Game(small_words, GameOptions(word="crane"), console,
                stream_reader(io.StringIO("")), state=state)
    assert game.stats.failed == 1
    assert game.stats.guess_frequency["slate"] == 1


def test_daily_rounds_continue(small_words, console):
    first = answer_for_day(small_words.final, 1, 3)
    second = answer_for_day(small_words.final, 2, 3)
    game = make_game(small_words, console, f"{first}\ny\n{second}\nn\n", day=1, seed=3)
    game.run()
    assert [g.answer for g in game.games] == [first.upper(), second.upper()]
    assert output_lines(console).count("CORRECT 1") == 2


# ----------------------------------------------------------------------------
# Answer selection
# ----------------------------------------------------------------------------

def test_random_answers_do_not_repeat(small_words, console):
    game = make_game(small_words, console, "", random=True)
    answers = [game.next_answer() for _ in range(len(small_words.final))]
    assert sorted(answers) == sorted(small_words.final)
    assert game.next_answer() is None


def test_answer_read_from_input(small_words, console):
    game = make_game(small_words, console, "zzzzz\nCrane\n")
    assert game.next_answer() == "crane"
    assert output_lines(console) == ["INVALID"]


def test_blank_answer_ends_session(small_words, console):
    game = make_game(small_words, console, "\n")
    assert game.next_answer() is None
