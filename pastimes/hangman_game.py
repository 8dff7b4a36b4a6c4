"""Rules and round loop of the hangman game."""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Sequence

from .hangman_render import MAX_TRIES, game_view, hanged_banner, win_banner


class GuessResult(Enum):
    """What a guessed letter turned out to be."""

    INVALID = "invalid"
    REPEATED = "repeated"
    MISS = "miss"
    HIT = "hit"


def choose_secret_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick a random word from the list."""
    if not words:
        raise ValueError("no words to choose from")
    return (rng or random).choice(list(words))


class HangmanRound:
    """State of one hangman round."""

    def __init__(self, secret_word: str) -> None:
        self.secret_word = secret_word
        self.guessed: set[str] = set()
        self.errors: list[str] = []

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def over(self) -> bool:
        return self.hanged() or self.won()

    def guess(self, letter: str) -> GuessResult:
        """Register a guessed letter; letters are compared in upper case."""
        if self.over:
            raise RuntimeError("the round is over")
        if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            return GuessResult.INVALID
        letter = letter.upper()
        if letter in self.guessed:
            return GuessResult.REPEATED
        self.guessed.add(letter)
        if letter not in self.secret_word:
            self.errors.append(letter)
            return GuessResult.MISS
        return GuessResult.HIT

    def won(self) -> bool:
        return all(c in self.guessed for c in self.secret_word)

    def hanged(self) -> bool:
        return len(self.errors) >= MAX_TRIES


def play_round(
    words: Sequence[str],
    read: Callable[[str], str] = input,
    write: Callable[[str], object] = print,
) -> HangmanRound:
    """Play one round until the player wins or is hanged."""
    secret = choose_secret_word(words)
    game = HangmanRound(secret)

    while True:
        write(game_view(secret, game.guessed, game.errors))
        letter = read("What's your guess? ").strip()[:1]
        result = game.guess(letter)
        shown = letter.upper()
        if result is GuessResult.INVALID:
            write("\nInvalid guess...\n")
        elif result is GuessResult.REPEATED:
            write("\nYou've already typed that letter...\n")
        elif result is GuessResult.MISS:
            write(f"\nThe secret word doesn't contain the letter {shown}\n")
        else:
            write(f"\nAlright! The secret word contains the letter {shown}\n")
        if game.over:
            break

    write(game_view(secret, game.guessed, game.errors))
    if game.hanged():
        write(hanged_banner())
    else:
        write(win_banner())
        if not game.errors:
            write("FLAWLESS VICTORY!")
    write(f"\nThe secret word was -> {secret} <-\n")
    return game