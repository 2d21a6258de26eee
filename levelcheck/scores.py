"""Reading and writing per-section scores stored as small text files."""

from __future__ import annotations

import os
from pathlib import Path

SECTIONS = ("grammar", "writing", "listening", "speaking")


def score_path(section: str, directory: str | os.PathLike[str] | None = None) -> Path:
    """Return the path of the score file for *section* inside *directory*."""
    if section not in SECTIONS:
        raise ValueError(f"unknown section: {section!r}")
    base = Path(directory) if directory is not None else Path()
    return base / f"{section}_score.txt"


def save_score(path: str | os.PathLike[str], score: int) -> None:
    """Write *score* as the whole content of the file at *path*."""
    Path(path).write_text(str(int(score)), encoding="utf-8")


def load_score(path: str | os.PathLike[str]) -> int:
    """Read the score from the first line of *path*; 0 if missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            first_line = handle.readline()
    except OSError:
        return 0
    try:
        return int(first_line.strip())
    except ValueError:
        return 0