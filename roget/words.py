"""
words.py

Handles building and loading the word collections the game runs on:

    Dictionary      frozenset of legal words (guesses and answers)
    FrequencyTable  dict of word -> non-negative weight (how common it is)

No numpy here, just clean text handling.
"""

import math
from pathlib import Path


# Every word in a game has this many letters.
WORD_SIZE = 5

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
FREQUENCIES_PATH = DATA_DIR / "frequencies.txt"
ANSWERS_PATH = DATA_DIR / "answers.txt"


def as_word(text, word_size=WORD_SIZE):
    """Normalize raw text into a word, rejecting anything of the wrong length."""
    word = text.strip().lower()
    if len(word) != word_size:
        raise ValueError(
            f"word {word!r} has length {len(word)}, expected {word_size}"
        )
    return word


def build_dictionary(words, word_size=WORD_SIZE):
    """Build the read-only set of legal words from any iterable of words."""
    return frozenset(as_word(w, word_size) for w in words)


def build_frequency_table(pairs, word_size=WORD_SIZE):
    """
    Build a word -> weight mapping from (word, weight) pairs.

    Weights must be non-negative numbers. A word listed twice keeps its last
    weight, matching how a mapping built from the pairs would behave.
    """
    table = {}
    for word, weight in pairs:
        word = as_word(word, word_size)
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"weight for {word!r} is not a number: {weight!r}") from exc
        if math.isnan(weight) or weight < 0:
            raise ValueError(f"weight for {word!r} must be non-negative, got {weight}")
        table[word] = weight
    return table


def load_word_list(path, word_size=WORD_SIZE):
    """Load a whitespace-separated word list into a Python list."""
    with open(path, "r") as f:
        return [as_word(token, word_size) for token in f.read().split()]


def load_frequency_pairs(path):
    """Read a two-column ``word count`` file into (word, count) pairs."""
    pairs = []
    with open(path, "r") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            fields = line.split()
            if len(fields) != 2:
                raise ValueError(
                    f"{path}:{line_no}: expected 'word count', got {line.strip()!r}"
                )
            pairs.append((fields[0], fields[1]))
    return pairs


def load_words(
    dictionary_path=DICTIONARY_PATH,
    frequencies_path=FREQUENCIES_PATH,
    answers_path=ANSWERS_PATH,
    word_size=WORD_SIZE,
):
    """
    Returns:
        dictionary: frozenset of legal words
        frequencies: word -> weight table
        answers: list of answers to evaluate, in file order
    """
    dictionary = build_dictionary(load_word_list(dictionary_path, word_size), word_size)
    frequencies = build_frequency_table(load_frequency_pairs(frequencies_path), word_size)
    answers = load_word_list(answers_path, word_size)
    return dictionary, frequencies, answers
