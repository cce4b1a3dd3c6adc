"""
patterns.py

Scores a guess against an answer under Wordle's duplicate-letter rules.

A score mask holds one Correctness per letter position. Masks are also
encoded as base-3 integers (first position most significant):

    0 = gray    (WRONG)
    1 = yellow  (MISPLACED)
    2 = green   (CORRECT)

so a 5-letter mask is a code in 0..242 and all-green is 242. The integer
form lets the entropy code bucket outcomes with a single np.bincount.
"""

from enum import IntEnum

import numpy as np
from numba import njit


class Correctness(IntEnum):
    WRONG = 0
    MISPLACED = 1
    CORRECT = 2


def check(answer, guess):
    """
    Score *guess* against *answer*, returning a tuple of Correctness.

    Two passes over a consumption bitmap of answer positions:

    1. Exact matches are CORRECT and consume their answer position.
    2. Every other guess letter takes the leftmost unconsumed answer
       position holding the same letter (MISPLACED) or is WRONG.

    Each answer letter is matched at most once, and greens claim their
    letters before any yellow does.
    """
    n = len(answer)
    if len(guess) != n:
        raise ValueError(f"guess length ({len(guess)}) != answer length ({n})")

    mask = [Correctness.WRONG] * n
    consumed = [False] * n

    # First pass: greens
    for i in range(n):
        if guess[i] == answer[i]:
            mask[i] = Correctness.CORRECT
            consumed[i] = True

    # Second pass: yellows from whatever the greens left over
    for i in range(n):
        if mask[i] == Correctness.CORRECT:
            continue
        for j in range(n):
            if not consumed[j] and answer[j] == guess[i]:
                mask[i] = Correctness.MISPLACED
                consumed[j] = True
                break

    return tuple(mask)


def encode_mask(mask):
    """Convert a mask into its base-3 integer code."""
    code = 0
    for c in mask:
        code = code * 3 + int(c)
    return code


def all_correct_code(size):
    return 3**size - 1


def mask_to_string(mask):
    """Render a mask as G (green), Y (yellow) and - (gray), one per letter."""
    symbols = {
        Correctness.CORRECT: "G",
        Correctness.MISPLACED: "Y",
        Correctness.WRONG: "-",
    }
    return "".join(symbols[Correctness(c)] for c in mask)


def encode_words(words):
    """Convert words into an (n_words, size) array of character code points."""
    words = list(words)
    size = len(words[0]) if words else 0
    arr = np.zeros((len(words), size), dtype=np.int32)
    for i, w in enumerate(words):
        for j, ch in enumerate(w):
            arr[i, j] = ord(ch)
    return arr


@njit(cache=True)
def _mask_code(guess, answer, consumed, mask):
    n = guess.shape[0]
    for i in range(n):
        consumed[i] = False
        mask[i] = 0

    for i in range(n):
        if guess[i] == answer[i]:
            mask[i] = 2
            consumed[i] = True

    for i in range(n):
        if mask[i] == 2:
            continue
        for j in range(n):
            if not consumed[j] and answer[j] == guess[i]:
                mask[i] = 1
                consumed[j] = True
                break

    code = 0
    for i in range(n):
        code = code * 3 + mask[i]
    return code


@njit(cache=True)
def mask_codes(guess, answers):
    """
    Mask codes of one guess (shape (size,)) against many answers
    (shape (n_answers, size)). Same rules as check().
    """
    n = guess.shape[0]
    consumed = np.zeros(n, dtype=np.bool_)
    mask = np.zeros(n, dtype=np.int64)
    codes = np.empty(answers.shape[0], dtype=np.int64)
    for k in range(answers.shape[0]):
        codes[k] = _mask_code(guess, answers[k], consumed, mask)
    return codes
