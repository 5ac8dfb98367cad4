"""wordle-assist: suggest guesses and narrow candidates for Wordle-style games."""

__version__ = "0.1.0"
