import pytest

from pastimes.hangman_render import (
    MAX_TRIES,
    game_view,
    gibbet,
    hanged_banner,
    header,
    masked_word,
    menu,
    win_banner,
    wrong_guesses,
)


def test_header_has_title():
    text = header()
    assert " |   THE HANGMAN" in text.splitlines()
    assert text.startswith("  _______ ")


def test_menu_lists_options():
    lines = menu().splitlines()
    assert "[1] Play game" in lines
    assert "[2] Add word" in lines
    assert lines[0] == "-- MENU --"


def test_banners_end_with_messages():
    assert hanged_banner().endswith("Sorry, you were hanged...")
    assert win_banner().endswith("Congratulations, you won!")


def test_empty_gibbet_has_full_lives():
    text = gibbet(0)
    assert "Lives: 6 of 6" in text
    assert "(_)" not in text
    assert "/|" not in text


@pytest.mark.parametrize(
    "errors, present, absent",
    [
        (1, ["(_)"], ["/|"]),
        (2, ["(_)", " |       |"], ["/|"]),
        (3, [" |      /|\n"], ["/|\\"]),
        (4, ["/|\\"], [" |      /\n"]),
        (5, [" |      /\n"], ["/ \\"]),
        (6, ["/|\\", "/ \\"], []),
    ],
)
def test_gibbet_body_parts(errors, present, absent):
    text = gibbet(errors)
    for part in present:
        assert part in text
    for part in absent:
        assert part not in text


def test_gibbet_lives_decrease():
    assert f"Lives: 0 of {MAX_TRIES}" in gibbet(MAX_TRIES)


def test_masked_word():
    assert masked_word("ABA", {"A"}) == "A _ A "
    assert masked_word("XYZ", set()).count("_") == 3
    assert "_" not in masked_word("XYZ", {"X", "Y", "Z"})


def test_wrong_guesses():
    assert wrong_guesses([]) == "\nWrong letters:\n"
    assert wrong_guesses(["X", "Y"]).endswith("X - Y")


def test_game_view_combines_parts():
    text = game_view("ABC", {"A", "Z"}, ["Z"])
    assert text.startswith(gibbet(1))
    assert masked_word("ABC", {"A", "Z"}) in text
    assert text.endswith(wrong_guesses(["Z"]) + "\n")