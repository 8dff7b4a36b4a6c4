"""Menu-driven hangman application with an editable word list."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, MutableSequence

from .hangman_game import play_round
from .hangman_render import header, menu
from .hangman_words import WORDS_FILE, WordDatabaseError, load_words, save_words

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 20

_WORD_PATTERN = re.compile(rf"[A-Za-z]{{{MIN_WORD_LENGTH},{MAX_WORD_LENGTH}}}")
_INVALID_WORD = (
    f"Words must have a length between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH} "
    "and contain only letters!"
)
_NO_WORDS = (
    "There are no words available for playing...\n"
    "You need to add at least one word!\n"
)

Reader = Callable[[str], str]
Writer = Callable[[str], object]


def normalize_word(word: str) -> str:
    """Validate a new word and return it in upper case."""
    if not _WORD_PATTERN.fullmatch(word):
        raise ValueError(_INVALID_WORD)
    return word.upper()


def add_word(
    words: MutableSequence[str], new_word: str, path: str | Path = WORDS_FILE
) -> bool:
    """Add a valid, new word to the list and save it; return whether it was added."""
    word = normalize_word(new_word)
    if word in words:
        return False
    words.append(word)
    save_words(words, path)
    return True


def _ask_word(
    words: MutableSequence[str], read: Reader, write: Writer, path: str | Path
) -> None:
    tokens = read("Type in the new word: ").split()
    try:
        add_word(words, tokens[0] if tokens else "", path)
    except ValueError:
        write(f"\nInvalid value!\n{_INVALID_WORD}\n")


def _read_option(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def run(
    read: Reader = input, write: Writer = print, path: str | Path = WORDS_FILE
) -> None:
    """Show the menu until the player chooses to leave."""
    write(header())
    words = load_words(path)
    while not words:
        write(_NO_WORDS)
        _ask_word(words, read, write, path)

    while True:
        write(menu())
        option = _read_option(read("Choose... "))
        if option == 1:
            play_round(words, read, write)
        elif option == 2:
            _ask_word(words, read, write, path)
        else:
            break

    write("\ngame over")


def main(argv: list[str] | None = None) -> int:
    """Play hangman on the terminal."""
    parser = argparse.ArgumentParser(prog="hangman", description="The hangman game.")
    parser.add_argument(
        "--words", default=WORDS_FILE, help="word list file (default: %(default)s)"
    )
    args = parser.parse_args(argv)
    try:
        run(input, print, args.words)
    except WordDatabaseError:
        print("\nWord database unreachable!\n\nexecution terminated", file=sys.stderr)
        return 1
    except EOFError:
        print()
    return 0