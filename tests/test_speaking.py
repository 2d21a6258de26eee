from datetime import datetime

import pytest

from levelcheck.scores import load_score, score_path
from levelcheck.speaking import (
    REFERENCE_TEXT,
    PronunciationResult,
    RecordingTooSmallError,
    check_recording,
    evaluate,
    recording_path,
    submit,
)


def test_perfect_reading_scores_full_marks():
    result = evaluate(REFERENCE_TEXT, 7.0)
    assert result.accuracy == 100.0
    assert result.score == 10
    assert result.incorrect_words == ()


def test_case_is_ignored():
    upper = evaluate(REFERENCE_TEXT.upper(), 7.0)
    assert upper.accuracy == evaluate(REFERENCE_TEXT, 7.0).accuracy


def test_short_recording_loses_two_points():
    assert evaluate(REFERENCE_TEXT, 3.0).score == evaluate(REFERENCE_TEXT, 7.0).score - 2


def test_short_recording_never_below_one():
    assert evaluate("", 2.0).score == 1


def test_long_recording_capped_at_ten():
    assert evaluate(REFERENCE_TEXT, 11.0).score == 10


def test_long_recording_gains_a_point():
    partial = "today i want to talk about my favorite hobby"
    assert evaluate(partial, 12.0).score == evaluate(partial, 7.0).score + 1


def test_silence_scores_zero_with_all_words_wrong():
    result = evaluate("", 7.0)
    assert result.score == 0
    assert result.accuracy == 0.0
    assert len(result.incorrect_words) == len(REFERENCE_TEXT.split())


def test_custom_reference_reports_missing_words():
    result = evaluate("HELLO", 7.0, reference="hello world")
    assert result.incorrect_words == ("world",)
    assert result.accuracy == 50.0


def test_recognized_text_is_trimmed():
    assert evaluate("  hello  ", 7.0, reference="hello").recognized_text == "hello"


def test_empty_reference_rejected():
    with pytest.raises(ValueError):
        evaluate("hello", 7.0, reference="   ")


def test_summary_contains_values():
    result = PronunciationResult(
        score=7, accuracy=72.34, duration=8.0, incorrect_words=("guitar.", "life."), recognized_text="hi"
    )
    text = result.summary()
    assert "7/10" in text
    assert "72.3%" in text
    assert "8.0 сек" in text
    assert "guitar., life." in text
    assert "hi</p>" in text


def test_missing_recording_rejected(tmp_path):
    with pytest.raises(RecordingTooSmallError):
        check_recording(tmp_path / "absent.wav")


def test_small_recording_rejected(tmp_path):
    small = tmp_path / "small.wav"
    small.write_bytes(b"\0" * 1023)
    with pytest.raises(RecordingTooSmallError) as info:
        check_recording(small)
    assert info.value.path == small


def test_large_enough_recording_accepted(tmp_path):
    big = tmp_path / "big.wav"
    big.write_bytes(b"\0" * 1024)
    assert check_recording(big) == big


def test_recording_path_uses_timestamp(tmp_path):
    path = recording_path(tmp_path, datetime(2024, 1, 2, 3, 4, 5))
    assert path == tmp_path / "speaking_20240102_030405.wav"


def test_submit_saves_score(tmp_path):
    result = submit("today i want to talk", 6.0, tmp_path)
    assert load_score(score_path("speaking", tmp_path)) == result.score