"""
main.py

Plays Wordle against a list of answers and reports how many turns the
chosen strategy needed.

Modes:
(default): play every answer in the answers file and print the turn
  distribution
-answer WORD: play a single game and print every turn

Optional:
-strategy entropy|constant: guessing strategy (default: entropy)
-word WORD: word repeated by the constant strategy
-max-turns N: turns before a game counts as lost (default: 32)
-workers N: worker processes for the batch run
-limit N: only play the first N answers
"""

import argparse
import time

from roget.benchmark import STRATEGIES, benchmark, make_guesser, print_results
from roget.game import MAX_TURNS, IllegalGuessError, Wordle
from roget.guessers import DEFAULT_CONSTANT_WORD
from roget.words import (
    ANSWERS_PATH,
    DICTIONARY_PATH,
    FREQUENCIES_PATH,
    as_word,
    load_words,
)


def run_single_answer(wordle, frequencies, answer, strategy, word):
    guesser = make_guesser(strategy, wordle.dictionary, frequencies, word=word)
    start = time.time()
    turns = wordle.play(answer, guesser, verbose=True)
    elapsed = time.time() - start

    if turns is None:
        print(f"\n{answer}: not solved in {wordle.max_turns} turns ({elapsed:.2f}s)")
    else:
        print(f"\n{answer}: solved in {turns} turns ({elapsed:.2f}s)")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Simulate Wordle games and evaluate a guessing strategy."
    )
    parser.add_argument(
        "-dictionary",
        default=str(DICTIONARY_PATH),
        help="Whitespace-separated list of legal words.",
    )
    parser.add_argument(
        "-frequencies",
        default=str(FREQUENCIES_PATH),
        help="Two-column 'word count' file of word frequencies.",
    )
    parser.add_argument(
        "-answers",
        default=str(ANSWERS_PATH),
        help="Whitespace-separated list of answers to play.",
    )
    parser.add_argument(
        "-strategy",
        choices=STRATEGIES,
        default="entropy",
        help="Guessing strategy (default: entropy).",
    )
    parser.add_argument(
        "-word",
        default=DEFAULT_CONSTANT_WORD,
        help=f"Word repeated by the constant strategy (default: {DEFAULT_CONSTANT_WORD}).",
    )
    parser.add_argument(
        "-max-turns",
        type=int,
        default=MAX_TURNS,
        help=f"Turns before a game counts as lost (default: {MAX_TURNS}).",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help="Worker processes for the batch run (default: 1).",
    )
    parser.add_argument(
        "-limit",
        type=int,
        default=None,
        help="Only play the first N answers.",
    )
    parser.add_argument(
        "-answer",
        default=None,
        help="Play a single game against this answer and show every turn.",
    )
    return parser.parse_args()


def main():
    args = parse_args()

    if args.limit is not None and args.limit < 0:
        raise SystemExit(f"-limit must be non-negative, got {args.limit}")

    try:
        dictionary, frequencies, answers = load_words(
            args.dictionary, args.frequencies, args.answers
        )
        wordle = Wordle(dictionary, max_turns=args.max_turns)
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Dictionary: {len(dictionary)} words, frequencies: {len(frequencies)} words")

    word = args.word
    if args.strategy == "constant":
        try:
            word = as_word(args.word)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        if word not in dictionary:
            raise SystemExit(f"-word {word!r} is not in the dictionary")

    if args.answer is not None:
        try:
            answer = as_word(args.answer)
            run_single_answer(wordle, frequencies, answer, args.strategy, word)
        except (ValueError, IllegalGuessError) as exc:
            raise SystemExit(str(exc)) from exc
        return

    if args.limit is not None:
        answers = answers[: args.limit]
    print(f"Playing {len(answers)} answers with the {args.strategy} strategy...")

    try:
        results = benchmark(
            wordle,
            answers,
            frequencies,
            strategy=args.strategy,
            workers=args.workers,
            word=word,
        )
    except (ValueError, IllegalGuessError) as exc:
        raise SystemExit(str(exc)) from exc

    print_results(results)


if __name__ == "__main__":
    main()
