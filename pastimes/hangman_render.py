"""Text drawings for the hangman game."""

from __future__ import annotations

from typing import Collection, Sequence

MAX_TRIES = 6


def header() -> str:
    """Game title drawing."""
    return "\n".join(
        [
            "  _______ ",
            " |/      |",
            " |",
            " |   THE HANGMAN",
            " |      GAME",
            " |",
            " |",
            "_|___\n",
        ]
    )


def menu() -> str:
    """Main menu options."""
    return "\n".join(["-- MENU --\n", "[1] Play game", "[2] Add word\n"])


def hanged_banner() -> str:
    """Message shown when the player loses."""
    return "\n".join(
        [
            "      _______________",
            "     /               \\",
            "    /                 \\",
            "  //                   \\/\\",
            "  \\|    XXX      XXX    | /",
            "   |   XXX      XXX    |/",
            "   |    XXX      XXX   |",
            "   |                   |",
            "   \\__      XXX      __/",
            "     |\\     XXX     /|",
            "     | |           | |",
            "     | I I I I I I I |",
            "     |  I I I I I I  |",
            "     \\_             _/",
            "       \\_         _/",
            "         \\_______/\n",
            "Sorry, you were hanged...",
        ]
    )


def win_banner() -> str:
    """Message shown when the player wins."""
    return "\n".join(
        [
            "       ___________",
            "      '._==_==_=_.'",
            "      .-\\:      /-.",
            "     | (|:.     |) |",
            "      '-|:.     |-'",
            "        \\::.    /",
            "         '::. .'",
            "           ) (",
            "         _.' '._",
            "        '-------'\n",
            "Congratulations, you won!",
        ]
    )


def gibbet(error_count: int) -> str:
    """Gibbet with one more body part for each wrong guess."""
    head = "(_)" if error_count >= 1 else ""
    if error_count >= 4:
        body = "/|\\"
    elif error_count >= 3:
        body = "/|"
    elif error_count >= 2:
        body = " |"
    else:
        body = ""
    lower_body = " |" if error_count >= 2 else ""
    if error_count >= 6:
        legs = "/ \\"
    elif error_count >= 5:
        legs = "/"
    else:
        legs = ""

    lives = f"\nLives: {MAX_TRIES - error_count} of {MAX_TRIES}\n"
    drawing = "\n".join(
        [
            "  _______ ",
            " |/      |",
            f" |      {head}",
            f" |      {body}",
            f" |      {lower_body}",
            f" |      {legs}",
            " |",
            "_|___\n\n",
        ]
    )
    return lives + drawing


def masked_word(word: str, guessed: Collection[str]) -> str:
    """The word with unguessed letters shown as underscores."""
    return "".join(f"{c if c in guessed else '_'} " for c in word)


def wrong_guesses(errors: Sequence[str]) -> str:
    """List of the wrong letters guessed so far."""
    return "\nWrong letters:\n" + " - ".join(errors)


def game_view(word: str, guessed: Collection[str], errors: Sequence[str]) -> str:
    """Full picture of the current round."""
    return "\n".join(
        [gibbet(len(errors)), masked_word(word, guessed), wrong_guesses(errors), ""]
    )