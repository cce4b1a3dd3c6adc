"""
guessers.py

Guessing strategies for roget.game.Wordle.

ConstantGuesser is the baseline: it names the same word every turn.
EntropyGuesser keeps a frequency-weighted pool of words still consistent
with every mask seen so far and guesses the pool word whose masks would
split the pool most evenly, i.e. the one with the highest expected
information.
"""

from dataclasses import dataclass

import numpy as np

from roget.entropy import pool_entropies
from roget.game import Guesser
from roget.patterns import all_correct_code, encode_mask, encode_words, mask_codes


DEFAULT_CONSTANT_WORD = "which"


class EmptyPoolError(RuntimeError):
    """No word is consistent with the masks seen so far."""


class ConstantGuesser(Guesser):
    def __init__(self, word=DEFAULT_CONSTANT_WORD):
        self.word = word

    def guess(self, history):
        return self.word


@dataclass(frozen=True)
class Candidate:
    word: str
    # Frequency weight taken from the pool.
    weight: float
    # Expected bits revealed by guessing this word. 2 bits means the pool
    # is expected to shrink to a quarter of its weight.
    information: float


class EntropyGuesser(Guesser):
    """
    Guess the pool word with the highest expected information.

    Parameters
    ----------
    dictionary : frozenset[str]
        Legal words; the pool starts as all of them.
    frequencies : dict[str, float]
        Word weights. Words missing from the table weigh 0, entries outside
        the dictionary are ignored.
    opening : str or None
        If given, returned on the first turn instead of searching. Batch
        runs compute the opening once and hand it to every game.

    One instance plays one game: the pool only shrinks.
    """

    def __init__(self, dictionary, frequencies, opening=None):
        if opening is not None and opening not in dictionary:
            raise ValueError(f"opening {opening!r} is not in the dictionary")
        self.dictionary = dictionary
        self.opening = opening
        self._pool = {word: frequencies.get(word, 0.0) for word in sorted(dictionary)}

    @property
    def remaining(self):
        """Copy of the current pool (word -> weight)."""
        return dict(self._pool)

    def prune(self, last):
        """Keep only pool words that would have scored *last*.word as *last*.mask."""
        if not self._pool:
            return
        target = encode_mask(last.mask)
        if target == all_correct_code(len(last.mask)):
            # Only the guessed word itself scores all green
            self._pool = {w: wt for w, wt in self._pool.items() if w == last.word}
            return
        words = list(self._pool)
        codes = mask_codes(encode_words([last.word])[0], encode_words(words))
        self._pool = {
            word: self._pool[word]
            for word, code in zip(words, codes)
            if code == target
        }

    def evaluate(self):
        """Score every pool word as the next guess."""
        words = list(self._pool)
        if not words:
            return []

        weights = np.array([self._pool[w] for w in words], dtype=np.float64)
        if weights.sum() <= 0:
            # Nothing left with a known frequency, so treat the rest as equally likely
            weights = np.ones(len(words), dtype=np.float64)

        chars = encode_words(words)
        entropies = pool_entropies(chars, weights, 3 ** chars.shape[1])
        return [
            Candidate(word=w, weight=self._pool[w], information=float(h))
            for w, h in zip(words, entropies)
        ]

    def guess(self, history):
        """
        Prune the pool with the latest mask, then return the best pool word.

        Only the latest guess needs checking: earlier masks were already
        applied on earlier turns.
        """
        if history:
            self.prune(history[-1])
        elif self.opening is not None:
            return self.opening

        best = None
        for candidate in self.evaluate():
            if best is None or _better(candidate, best):
                best = candidate

        if best is None:
            raise EmptyPoolError("no candidate word is consistent with the masks so far")

        return best.word


def _better(a, b):
    """Higher information wins, then higher weight, then the earlier word."""
    if a.information != b.information:
        return a.information > b.information
    if a.weight != b.weight:
        return a.weight > b.weight
    return a.word < b.word
