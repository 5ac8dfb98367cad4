"""
Wordle-style feedback for a single (guess, answer) pair.

Conventions (same alphabet the player types in):
  - '2' : correct letter in the correct position
  - '1' : correct letter in the wrong position
  - '0' : letter not present (or present fewer times than guessed)

The assistant itself never knows the answer; this is what the simulation
harness uses to stand in for the game, and what tests use to check that
filtering never throws the real answer away.

Algorithm (two-pass, duplicate-safe):
  1) Mark all exact matches and count the answer's unmatched letters.
  2) Mark misplaced letters only while that letter still has remaining count.
"""

from collections import Counter

from .validation import ABSENT, CORRECT, PRESENT


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "02111"
      score("apple", "angle") -> "20022"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = [ABSENT] * len(guess)

    # Pass 1: exact matches; leftover answer letters feed pass 2
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    # Pass 2: misplaced letters, capped by the answer's multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)
