from wordle_engine.candidates import remaining
from wordle_engine.feedback import score

DICTIONARY = ["CRANE", "SLATE", "TRACE"]
ACCEPTABLE = ["crane", "crate", "grate", "craze", "trace", "slate", "brace", "sheet", "cramp"]


def test_empty_history_keeps_everything_sorted():
    assert remaining(["trace", "crane", "slate"], []) == ["crane", "slate", "trace"]


def test_end_to_end_round():
    answer = "crane"
    first = score("trace", answer)
    assert first == "RGGYG"
    assert remaining(DICTIONARY, [("trace", first)]) == ["crane"]

    second = score("crane", answer)
    assert second == "GGGGG"
    assert remaining(DICTIONARY, [("crane", second)]) == ["crane"]


def test_answer_always_survives():
    for answer in ACCEPTABLE:
        history = [(g, score(g, answer)) for g in ("slate", "brace")]
        assert answer in remaining(ACCEPTABLE, history)


def test_idempotent():
    history = [("slate", score("slate", "crate"))]
    once = remaining(ACCEPTABLE, history)
    assert remaining(once, history) == once


def test_history_order_does_not_matter():
    history = [("slate", score("slate", "craze")), ("cramp", score("cramp", "craze"))]
    assert remaining(ACCEPTABLE, history) == remaining(ACCEPTABLE, history[::-1])


def test_inconsistent_feedback_leaves_nothing():
    history = [("crane", "GGGGG"), ("slate", "GGGGG")]
    assert remaining(ACCEPTABLE, history) == []


def test_empty_dictionary():
    assert remaining([], [("crane", "GGGGG")]) == []
