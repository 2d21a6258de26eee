import io

import pytest

from levelcheck.cli import main
from levelcheck.grammar import QUESTIONS
from levelcheck.level import average_report, final_result
from levelcheck.scores import load_score, save_score, score_path
from levelcheck.speaking import REFERENCE_TEXT, evaluate
from levelcheck.writing import WritingChecker

ESSAY = "I like music and play sport. " * 24


def test_menu_lists_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Full English Level Test" in out
    assert "View Final Results" in out


def test_grammar_all_correct(tmp_path, monkeypatch, capsys):
    answers = "".join(question.answer + "\n" for question in QUESTIONS)
    monkeypatch.setattr("sys.stdin", io.StringIO(answers))
    assert main(["--directory", str(tmp_path), "grammar"]) == 0
    assert load_score(score_path("grammar", tmp_path)) == 10
    assert "10/10" in capsys.readouterr().out


def test_grammar_no_input_scores_zero(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--directory", str(tmp_path), "grammar"]) == 0
    assert load_score(score_path("grammar", tmp_path)) == 0


def test_listening_correct_answers(tmp_path, capsys):
    assert main(["--directory", str(tmp_path), "listening", "c", "b", "c", "c", "d"]) == 0
    assert load_score(score_path("listening", tmp_path)) == 10
    assert "Correct answers: 5/5" in capsys.readouterr().out


def test_listening_rejects_bad_letter(tmp_path):
    with pytest.raises(SystemExit):
        main(["--directory", str(tmp_path), "listening", "z"])


def test_writing_too_short_fails(tmp_path, capsys):
    essay = tmp_path / "essay.txt"
    essay.write_text("I like music.", encoding="utf-8")
    assert main(["--directory", str(tmp_path), "writing", str(essay)]) == 1
    assert "120" in capsys.readouterr().err


def test_writing_check_and_save(tmp_path, capsys):
    essay = tmp_path / "essay.txt"
    essay.write_text(ESSAY, encoding="utf-8")
    expected = WritingChecker().check(ESSAY).score
    assert main(["--directory", str(tmp_path), "writing", str(essay)]) == 0
    assert f"Предварительная оценка: {expected}/10" in capsys.readouterr().out
    assert main(["--directory", str(tmp_path), "writing", str(essay), "--save"]) == 0
    assert load_score(score_path("writing", tmp_path)) == expected


def test_speaking_saves_score(tmp_path):
    args = ["--directory", str(tmp_path), "speaking", "--text", REFERENCE_TEXT, "--duration", "12"]
    assert main(args) == 0
    assert load_score(score_path("speaking", tmp_path)) == evaluate(REFERENCE_TEXT, 12.0).score


def test_speaking_rejects_small_recording(tmp_path):
    recording = tmp_path / "rec.wav"
    recording.write_bytes(b"\0" * 10)
    args = [
        "--directory", str(tmp_path), "speaking",
        "--text", "hello", "--duration", "6", "--recording", str(recording),
    ]
    assert main(args) == 1
    assert not score_path("speaking", tmp_path).exists()


def test_results_render(tmp_path, capsys):
    save_score(score_path("grammar", tmp_path), 8)
    save_score(score_path("writing", tmp_path), 7)
    assert main(["--directory", str(tmp_path), "results"]) == 0
    assert capsys.readouterr().out.strip() == final_result(tmp_path).render()


def test_results_average(tmp_path, capsys):
    save_score(score_path("listening", tmp_path), 6)
    assert main(["--directory", str(tmp_path), "results", "--average"]) == 0
    assert capsys.readouterr().out.strip() == average_report(0, 0, 0, 6)