# levelcheck

levelcheck estimates a learner's English level from four sections. Each
section is scored out of 10, and the four scores add up to a total out of 40.
That total maps to a CEFR level from A1 to C2. Prompts and messages are mostly
in Russian, and the test material is in English.

- **Grammar** (`levelcheck.grammar`): twenty fill-in-the-gap questions with
  typed answers. Case and surrounding spaces are ignored. Thirteen questions
  are worth one point and seven are worth two. The total is scaled to 10 and
  rounded down.
- **Writing** (`levelcheck.writing`): an essay about hobbies. The essay must
  have at least 120 words. `WritingChecker` counts four kinds of error:
  sentences that start with a lower-case letter, runs of two or more spaces,
  punctuation with no space after it, and words missing from its word list.
  Every five errors cost one point. An essay over 150 words costs one more.
- **Listening** (`levelcheck.listening`): five multiple-choice questions about
  a recorded conversation. The number correct is scaled to 10.
- **Speaking** (`levelcheck.speaking`): a transcript of a read-aloud passage
  is compared word by word with `REFERENCE_TEXT`. The comparison ignores case
  and word order. The accuracy sets the score, and the recording's length then
  adjusts it:
  - under 5 seconds: minus two, never below 1
  - over 10 seconds: plus one, at most 10

Each section saves its score as a one-line text file: `grammar_score.txt`,
`writing_score.txt`, `listening_score.txt` and `speaking_score.txt`. By default
these go in the current directory. `levelcheck.level.final_result` reads them
back. A file that is missing or unreadable counts as 0.

## Installation

```
pip install .
```

## Command line

Run `levelcheck` with no command to list the sections:

```
levelcheck
```

Each section is its own sub-command. The global `--directory` option sets
where score files are read and written. It goes before the sub-command.

```
levelcheck grammar
levelcheck writing essay.txt [--dictionary english_words.txt] [--save]
levelcheck listening c b c c d
levelcheck speaking --text "today i want to talk ..." --duration 42.5 [--recording take.wav]
levelcheck results [--average]
levelcheck --directory scores results
```

- `grammar` asks each question on standard input. It prints the result and
  saves the scaled score. End of input counts as no answer.
- `writing` reads the essay from a file, or from standard input when the file
  is `-`.
  - Without `--save` it checks the essay and prints the error count, the word
    count and the score. The check fails if the text holds a character outside
    English letters, whitespace and common punctuation. It also fails if the
    essay is under 120 words.
  - With `--save` it saves the score instead. Only the word count is checked
    first.
  - Without `--dictionary`, a built-in list of about fifty common words is
    used. A dictionary file that cannot be read falls back to the same list.
- `listening` takes one letter `a`–`d` per question, or `-` to skip one.
  Questions left off the end count as unanswered. It prints and saves the
  score.
- `speaking` scores the given transcript and duration, then saves the score.
  With `--recording` it first checks that the file exists and holds at least
  1024 bytes.
- `results` prints the four scores, the total, the level and the level's
  description as HTML markup. With `--average` it prints a plain-text report
  instead. That report uses a separate scale with named levels: the average of
  the four scores, for example `B1 - Intermediate`.

The exit status is 1 when a writing check or a recording check fails, and 0
otherwise.

## Library use

```python
from levelcheck import grammar, level, listening, speaking, writing

result = grammar.grade(["reads", "play", "on"])   # unanswered questions score nothing
print(result.scaled, result.summary())

print(listening.check_answers([2, 1, 2, 2, 3]).summary())

checker = writing.WritingChecker.from_file("english_words.txt")
report = checker.check(essay_text)   # raises NonEnglishTextError or TooFewWordsError
print(report.word_count, report.error_count, report.score, report.misspelled)

print(speaking.evaluate("today i want to talk", duration=12.0).summary())

print(level.final_result(".").render())
print(level.average_report(grammar=8, speaking=6, writing=7, listening=10))
```

The functions that also save a score are:

- `grammar.run_test(ask, directory)`, where `ask` is called with each
  question's text
- `listening.submit`
- `speaking.submit`
- `WritingChecker.save`

`levelcheck.scores` provides `score_path`, `save_score` and `load_score` for
working with the score files directly.

The mapping from the total (out of 40) to a level is:

| Total  | Level |
|--------|-------|
| 0–10   | A1    |
| 11–20  | A2    |
| 21–30  | B1    |
| 31–35  | B2    |
| 36–38  | C1    |
| 39–40  | C2    |

## What it does not do

levelcheck has no graphical interface. It does not play the listening audio;
the file name it expects is in `listening.AUDIO_FILE`, and playing it is up
to you. It does not record speech and does not turn speech into text. The
speaking section needs a transcript and a duration produced elsewhere.
`speaking.recording_path` only builds a time-stamped file name for a
recording. The writing checker only finds misspelled words. It does not
suggest corrections.

## Running the tests

```
pip install .[test]
pytest
```