# pastimes

A handful of small console pastimes and the pieces they are built from.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `pastimes-guess`

Guess a secret number between 1 and 99. Pick a difficulty first:

| Choice | Level  | Tries |
|--------|--------|-------|
| 1      | Easy   | 15    |
| 2      | Medium | 10    |
| 3      | Hard   | 5     |

Choosing `42` gives you 42 tries. Any other choice prints "Invalid option!"
and ends the game straight away. You start with 1000 points and lose half the
distance between each wrong guess and the secret number. Guesses outside 1–99,
or input that is not a whole number, are rejected and do not use up a try.

### `pastimes-hangman`

The classic word game. Words are kept in `words.txt` in the current directory,
or in the file given with `--words PATH`. The file holds the number of words
followed by the words themselves, one per line. The file must exist: if it
cannot be read the command prints "Word database unreachable!" and exits with
status 1. If the file holds no words you are asked to add one before playing.

From the menu:

- `1` plays a round,
- `2` adds a word (letters only, 3 to 20 of them, stored in upper case,
  duplicates ignored) and saves the list back to the file,
- anything else quits.

Only the first character of each guess counts; guesses are compared in upper
case. You are hanged after six wrong letters.

### `pastimes-bank`

Runs a fixed demonstration of a toy bank: checking and savings accounts with
different withdrawal fees (5% and 3%), a transfer, two rejected withdrawals,
and a manager and a cashier with their bonuses (5% and 3% of salary).

### `pastimes-auction`

Evaluates a sample auction and prints its lowest bid, highest bid and its top
bids (at most three).

## Using the library

The game logic is usable without the console front ends:

```python
from pastimes.guessing import GuessingGame, GuessOutcome, tries_for

tries_for(2)                                 # 10
game = GuessingGame(tries_for(3), secret=40)
game.guess(10) is GuessOutcome.TOO_LOW       # True
game.points                                  # 985.0
```

```python
from pastimes.auction import Auction, Bid, Evaluator, User

auction = Auction("Opala 76")
auction.add_bid(Bid(User("Pafuncio"), 1000))
auction.add_bid(Bid(User("Jurema"), 2000))
evaluator = Evaluator()
evaluator.evaluate(auction)
evaluator.highest_value, evaluator.lowest_value   # (2000, 1000)
```

Modules:

- `pastimes.guessing` – `GuessingGame`, `Difficulty`, `GuessOutcome`, `tries_for`
- `pastimes.hangman_game` – `HangmanRound`, `GuessResult`, `choose_secret_word`, `play_round`
- `pastimes.hangman_render` – text drawings of the gibbet, masked word, wrong
  letters, menu and banners
- `pastimes.hangman_words` – `load_words`, `save_words`, `WordDatabaseError`
- `pastimes.hangman_app` – `normalize_word`, `add_word`, `run`
- `pastimes.accounts` – `Account`, `CheckingAccount`, `SavingsAccount` and the
  `WithdrawalError` family (`InsufficientFundsError`, `InvalidAmountError`)
- `pastimes.people` – `Weekday`, `Cpf`, `Person`, `Holder`, `Authenticator`
- `pastimes.staff` – `Employee`, `Manager`, `Cashier`
- `pastimes.bank_demo` – `withdraw_and_report`, `format_account`,
  `format_employee`, `format_person`, `smaller`
- `pastimes.auction` – `User`, `Bid`, `Auction`, `Evaluator`

## What it does not do

- The bank is a model in memory only: accounts and staff are not stored
  anywhere, and `pastimes-bank` runs a fixed script rather than an interactive
  session.
- The auction command evaluates a built-in sample; it takes no bids from the
  user.
- The guessing game keeps no scores between games.