import random

import pytest

from pastimes.hangman_game import (
    GuessResult,
    HangmanRound,
    choose_secret_word,
    play_round,
)


def test_choose_secret_word_is_member():
    words = ["APPLE", "BANANA", "CHERRY"]
    rng = random.Random(3)
    picks = {choose_secret_word(words, rng) for _ in range(50)}
    assert picks <= set(words)


def test_choose_single_word():
    assert choose_secret_word(["ONLY"]) == "ONLY"


def test_choose_from_empty_raises():
    with pytest.raises(ValueError):
        choose_secret_word([])


def test_guess_results():
    game = HangmanRound("ABC")
    assert game.guess("a") is GuessResult.HIT
    assert "A" in game.guessed
    assert game.guess("A") is GuessResult.REPEATED
    assert game.guess("1") is GuessResult.INVALID
    assert game.guess("") is GuessResult.INVALID
    assert game.guess("Z") is GuessResult.MISS
    assert game.errors == ["Z"]
    assert game.error_count == 1


def test_win_after_all_letters():
    game = HangmanRound("ABA")
    game.guess("A")
    assert not game.won()
    game.guess("b")
    assert game.won()
    assert not game.hanged()
    with pytest.raises(RuntimeError):
        game.guess("C")


def test_hanged_after_six_misses():
    game = HangmanRound("A")
    for letter in "BCDEFG":
        assert game.guess(letter) is GuessResult.MISS
    assert game.hanged()
    assert not game.won()
    assert game.errors == list("BCDEFG")
    with pytest.raises(RuntimeError):
        game.guess("A")


def _driver(answers):
    it = iter(answers)
    out = []
    return (lambda prompt: next(it)), out.append, out


def test_play_round_flawless_win():
    read, write, out = _driver(["a", "b"])
    game = play_round(["AB"], read, write)
    text = "\n".join(out)
    assert game.won()
    assert "Congratulations, you won!" in text
    assert "FLAWLESS VICTORY!" in text
    assert "The secret word was -> AB <-" in text


def test_play_round_win_with_errors_and_invalid_input():
    read, write, out = _driver(["", "z", "z", "a", "b"])
    game = play_round(["AB"], read, write)
    text = "\n".join(out)
    assert game.won()
    assert "Invalid guess..." in text
    assert "You've already typed that letter..." in text
    assert "The secret word doesn't contain the letter Z" in text
    assert "FLAWLESS VICTORY!" not in text


def test_play_round_loss():
    read, write, out = _driver(list("cdefgh"))
    game = play_round(["AB"], read, write)
    text = "\n".join(out)
    assert game.hanged()
    assert "Sorry, you were hanged..." in text
    assert "Congratulations, you won!" not in text
    assert "The secret word was -> AB <-" in text