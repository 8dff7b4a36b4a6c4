"""Storage of the hangman word list."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

WORDS_FILE = "words.txt"


class WordDatabaseError(Exception):
    """The word file could not be read or written."""


def load_words(path: str | Path = WORDS_FILE) -> list[str]:
    """Read the word list: a count followed by that many words."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise WordDatabaseError("Word database unreachable!") from exc

    tokens = text.split()
    if not tokens:
        return []
    try:
        count = int(tokens[0])
    except ValueError:
        raise WordDatabaseError(f"invalid word count: {tokens[0]!r}") from None
    return tokens[1 : 1 + max(count, 0)]


def save_words(words: Iterable[str], path: str | Path = WORDS_FILE) -> None:
    """Overwrite the word file with the given words."""
    words = list(words)
    content = "".join(f"{line}\n" for line in [str(len(words)), *words])
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WordDatabaseError("Word database unreachable!") from exc