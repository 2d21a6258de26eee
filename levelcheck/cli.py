"""Command-line entry point for the English level test."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from levelcheck import grammar, listening, speaking
from levelcheck.level import average_report, final_result
from levelcheck.writing import NonEnglishTextError, TooFewWordsError, WritingChecker

TITLE = "Full English Level Test"

_MENU = (
    ("grammar", "Grammar Test"),
    ("writing", "Writing Test"),
    ("listening", "Listening Test"),
    ("speaking", "Speaking Test"),
    ("results", "View Final Results"),
)


def _option_index(value: str) -> Optional[int]:
    letter = value.strip().lower()
    if letter == "-":
        return None
    if len(letter) == 1 and letter in "abcd":
        return "abcd".index(letter)
    raise argparse.ArgumentTypeError(f"expected a, b, c, d or -, got {value!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="levelcheck", description=TITLE)
    parser.add_argument(
        "--directory", default=None, help="where section scores are stored (default: current directory)"
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("grammar", help="answer the grammar questions")

    writing = commands.add_parser("writing", help="check an essay about hobbies")
    writing.add_argument("essay", help="file holding the essay, or - for standard input")
    writing.add_argument("--dictionary", default=None, help="word list, one word per line")
    writing.add_argument("--save", action="store_true", help="save the score")

    listen = commands.add_parser("listening", help="grade answers to the listening questions")
    listen.add_argument("answers", nargs="*", type=_option_index, help="a, b, c or d per question; - to skip")

    speak = commands.add_parser("speaking", help="score recognised speech against the passage")
    speak.add_argument("--text", required=True, help="the recognised text")
    speak.add_argument("--duration", required=True, type=float, help="recording length in seconds")
    speak.add_argument("--recording", default=None, help="recording file to verify first")

    results = commands.add_parser("results", help="show the final level")
    results.add_argument("--average", action="store_true", help="report the average instead")
    return parser


def _ask(prompt: str) -> Optional[str]:
    try:
        return input(prompt + "\n> ")
    except EOFError:
        return None


def _run_grammar(directory: Optional[str]) -> int:
    result = grammar.run_test(_ask, directory)
    print(result.summary())
    return 0


def _run_writing(args: argparse.Namespace) -> int:
    text = sys.stdin.read() if args.essay == "-" else Path(args.essay).read_text(encoding="utf-8")
    checker = WritingChecker.from_file(args.dictionary) if args.dictionary else WritingChecker()
    try:
        if args.save:
            report = checker.save(text, args.directory)
            print(f"Ваша оценка: {report.score}/10")
        else:
            report = checker.check(text)
            print(
                f"Найдено ошибок: {report.error_count}\n"
                f"Количество слов: {report.word_count}\n"
                f"Предварительная оценка: {report.score}/10"
            )
    except (NonEnglishTextError, TooFewWordsError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _run_speaking(args: argparse.Namespace) -> int:
    if args.recording is not None:
        try:
            speaking.check_recording(args.recording)
        except speaking.RecordingTooSmallError as error:
            print(error, file=sys.stderr)
            return 1
    result = speaking.submit(args.text, args.duration, args.directory)
    print(result.summary())
    return 0


def _run_results(args: argparse.Namespace) -> int:
    result = final_result(args.directory)
    if args.average:
        print(average_report(result.grammar, result.speaking, result.writing, result.listening))
    else:
        print(result.render())
    return 0


def _show_menu() -> int:
    print(TITLE)
    for command, label in _MENU:
        print(f"  {command:<10} {label}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one section of the test, or show the menu when none is named."""
    args = _build_parser().parse_args(argv)
    if args.command == "grammar":
        return _run_grammar(args.directory)
    if args.command == "writing":
        return _run_writing(args)
    if args.command == "listening":
        result = listening.submit(args.answers, args.directory)
        print(result.summary())
        return 0
    if args.command == "speaking":
        return _run_speaking(args)
    if args.command == "results":
        return _run_results(args)
    return _show_menu()


if __name__ == "__main__":
    sys.exit(main())