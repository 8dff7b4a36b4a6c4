"""Console pastimes: number guessing, hangman, a toy bank model and an auction evaluator."""

__version__ = "0.1.0"