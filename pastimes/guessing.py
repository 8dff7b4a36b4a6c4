"""Number guessing game: find a secret number between 1 and 99."""

from __future__ import annotations

import argparse
import random
from enum import Enum, IntEnum
from typing import Callable

MIN_GUESS = 1
MAX_GUESS = 99
INITIAL_POINTS = 1000.0
HIDDEN_CHOICE = 42

BANNER = "\n".join(
    [
        "****************************************************",
        "*   _____   _     _   _______    ______    ______  *",
        "*  / ____| | |   | | | ______|  / _____|  / _____| *",
        "* | |  __  | |   | | | |___    |  (____  |  (____  *",
        "* | | |_ | | |   | | | ____|    \\____  \\  \\____  \\ *",
        "* | |__| | | |___| | | |_____   _____) |  _____) | *",
        "*  \\_____|  \\_____/  |_______| |_______/ |_______/ *",
        "*                                                  *",
        "****************************************************",
    ]
)


class Difficulty(IntEnum):
    """Difficulty levels offered in the menu."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def tries(self) -> int:
        return _TRIES[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()


_TRIES = {Difficulty.EASY: 15, Difficulty.MEDIUM: 10, Difficulty.HARD: 5}


class GuessOutcome(Enum):
    """What a single guess turned out to be."""

    INVALID = "invalid"
    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"


def tries_for(choice: int | None) -> int:
    """Return the number of tries for a menu choice, or raise ValueError."""
    if choice == HIDDEN_CHOICE:
        return HIDDEN_CHOICE
    try:
        return Difficulty(choice).tries
    except ValueError:
        raise ValueError(f"invalid difficulty option: {choice!r}") from None


class GuessingGame:
    """State of one guessing game."""

    def __init__(self, tries: int, secret: int | None = None) -> None:
        if tries < 0:
            raise ValueError("tries must not be negative")
        self.tries = tries
        self.secret = random.randrange(100) if secret is None else secret
        self.points = INITIAL_POINTS
        self.attempts = 0
        self.won = False

    @property
    def over(self) -> bool:
        return self.won or self.attempts >= self.tries

    @property
    def lost(self) -> bool:
        return not self.won and self.attempts >= self.tries

    def guess(self, value: int) -> GuessOutcome:
        """Check a guess; out-of-range values do not use up a try."""
        if self.over:
            raise RuntimeError("the game is over")
        if not MIN_GUESS <= value <= MAX_GUESS:
            return GuessOutcome.INVALID
        self.attempts += 1
        if value == self.secret:
            self.won = True
            return GuessOutcome.CORRECT
        self.points -= abs(self.secret - value) / 2.0
        return GuessOutcome.TOO_LOW if self.secret > value else GuessOutcome.TOO_HIGH


def _read_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _play(read: Callable[[str], str], write: Callable[[str], object]) -> None:
    write(BANNER)
    write("Guess the secret number between 1 and 99!")
    write("\nDifficulty level")
    for level in Difficulty:
        write(f"[{level.value}] {level.label} ({level.tries} tries)")

    try:
        tries = tries_for(_read_int(read("Choose... ")))
    except ValueError:
        write("\nInvalid option!")
        return

    game = GuessingGame(tries)
    while not game.over:
        write(f"\nTries: {game.attempts + 1} of {game.tries}")
        value = _read_int(read("What's your guess? "))
        outcome = GuessOutcome.INVALID if value is None else game.guess(value)

        if outcome is GuessOutcome.INVALID:
            write("Invalid value, type an integer number between 1 and 99")
            continue
        if outcome is GuessOutcome.CORRECT:
            write(
                "\nCongratulations, you've guessed the secret number in "
                f"{game.attempts} tries!"
            )
            write(f"Points: {game.points:.2f}")
            break
        if outcome is GuessOutcome.TOO_LOW:
            write(f"The secret number is bigger than {value}")
        else:
            write(f"The secret number is smaller than {value}")
        if game.lost:
            write(f"\nYou lost...\nThe secret number was {game.secret}")
            write(f"Points: {game.points:.2f}")


def main(argv: list[str] | None = None) -> int:
    """Play the guessing game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="guessing", description="Guess the secret number between 1 and 99."
    )
    parser.parse_args(argv)
    try:
        _play(input, print)
    except EOFError:
        print()
    print("game over")
    return 0