[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pastimes"
version = "0.1.0"
description = "Small console pastimes: a number guessing game, hangman, a toy bank and an auction evaluator."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "hangman", "guessing-game", "console", "auction", "bank"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pastimes-guess = "pastimes.guessing:main"
pastimes-hangman = "pastimes.hangman_app:main"
pastimes-bank = "pastimes.bank_demo:main"
pastimes-auction = "pastimes.auction:main"

[tool.hatch.build.targets.wheel]
packages = ["pastimes"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
