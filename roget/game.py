"""
game.py

Runs Wordle games: a dictionary of legal words, a guesser asked for one
word per turn, and the number of turns it took (or None if it never got
there).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from roget.patterns import Correctness, check, mask_to_string


# Real Wordle stops at 6. Playing on lets the statistics show how far past
# six a weak strategy goes instead of lumping all of it into "lost".
MAX_TURNS = 32


class IllegalGuessError(RuntimeError):
    """A guesser returned a word that is not in the dictionary."""


@dataclass(frozen=True)
class Guess:
    word: str
    mask: Tuple[Correctness, ...]


class Guesser(ABC):
    """Interface every guessing strategy implements."""

    @abstractmethod
    def guess(self, history: Sequence[Guess]) -> str:
        """Return the next word given the guesses so far, oldest first."""
        ...


class FunctionGuesser(Guesser):
    """Lets a plain function or closure act as a guesser."""

    def __init__(self, fn: Callable[[Sequence[Guess]], str]):
        self._fn = fn

    def guess(self, history: Sequence[Guess]) -> str:
        return self._fn(history)


class Wordle:
    """
    A game host over a fixed dictionary.

    Parameters
    ----------
    dictionary : frozenset[str]
        Legal words. Shared read-only with every guesser.
    max_turns : int
        Turns allowed before a game counts as lost.
    """

    def __init__(self, dictionary, max_turns: int = MAX_TURNS):
        if max_turns < 1:
            raise ValueError(f"max_turns must be at least 1, got {max_turns}")
        self.dictionary = dictionary
        self.max_turns = max_turns

    def play(self, answer: str, guesser: Guesser, verbose: bool = False) -> Optional[int]:
        """
        Play one game against *answer*.

        Returns the 1-based turn on which the guesser named the answer, or
        None if it did not within max_turns.

        Raises
        ------
        ValueError
            If *answer* is not in the dictionary.
        IllegalGuessError
            If the guesser returns a word outside the dictionary.
        """
        if answer not in self.dictionary:
            raise ValueError(f"answer {answer!r} is not in the dictionary")

        history = []
        for turn in range(1, self.max_turns + 1):
            word = guesser.guess(tuple(history))

            if word not in self.dictionary:
                raise IllegalGuessError(
                    f"turn {turn}: guessed {word!r}, which is not in the dictionary"
                )

            if word == answer:
                if verbose:
                    print(f"Turn {turn}: {word} -> solved")
                return turn

            mask = check(answer, word)
            if verbose:
                print(f"Turn {turn}: {word} -> {mask_to_string(mask)}")
            history.append(Guess(word=word, mask=mask))

        if verbose:
            print(f"Not solved in {self.max_turns} turns")
        return None
