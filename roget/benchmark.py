"""
benchmark.py

Plays one game per answer and summarizes how many turns each took.

Every game gets its own freshly built guesser; the dictionary and frequency
table are only ever read. That makes games independent, so with workers > 1
the answers are split across processes and the results merged afterwards.
"""

import multiprocessing as mp
import os
import time
from collections import Counter

from tqdm import tqdm

from roget.game import Wordle
from roget.guessers import DEFAULT_CONSTANT_WORD, ConstantGuesser, EntropyGuesser


STRATEGIES = ("entropy", "constant")
MAX_FAILED_WORDS = 20

_WORKER_STATE = {}


def make_guesser(strategy, dictionary, frequencies, opening=None, word=DEFAULT_CONSTANT_WORD):
    """Build a new guesser for a single game."""
    if strategy == "entropy":
        return EntropyGuesser(dictionary, frequencies, opening=opening)
    if strategy == "constant":
        return ConstantGuesser(word)
    raise ValueError(f"unknown strategy {strategy!r}, expected one of {STRATEGIES}")


def _init_worker(dictionary, max_turns, frequencies, strategy, opening, word):
    _WORKER_STATE["wordle"] = Wordle(dictionary, max_turns=max_turns)
    _WORKER_STATE["frequencies"] = frequencies
    _WORKER_STATE["strategy"] = strategy
    _WORKER_STATE["opening"] = opening
    _WORKER_STATE["word"] = word


def _worker_play(task):
    index, answer = task
    wordle = _WORKER_STATE["wordle"]
    guesser = make_guesser(
        _WORKER_STATE["strategy"],
        wordle.dictionary,
        _WORKER_STATE["frequencies"],
        opening=_WORKER_STATE["opening"],
        word=_WORKER_STATE["word"],
    )
    return index, wordle.play(answer, guesser)


def benchmark(
    wordle,
    answers,
    frequencies,
    strategy="entropy",
    workers=1,
    word=DEFAULT_CONSTANT_WORD,
    verbose=True,
):
    """
    Play every answer and collect the turn counts.

    Args:
        wordle: Wordle instance (dictionary and turn cap)
        answers: answers to play, one game each
        frequencies: word -> weight table for the entropy strategy
        strategy: "entropy" or "constant"
        workers: worker processes (1 plays in this process)
        word: the word the constant strategy repeats
        verbose: show a progress bar

    Returns:
        Dict with results. ``turns`` pairs each answer with its turn count
        (None for a loss) in the order the answers were given.
    """
    answers = list(answers)
    for answer in answers:
        if answer not in wordle.dictionary:
            raise ValueError(f"answer {answer!r} is not in the dictionary")

    start = time.time()

    # The first guess does not depend on the answer, so search for it once
    opening = None
    if strategy == "entropy" and answers:
        if verbose:
            print("Computing opening guess...")
        opening = make_guesser(strategy, wordle.dictionary, frequencies).guess(())
        if verbose:
            print(f"Opening guess: {opening}")

    results = [None] * len(answers)
    tasks = list(enumerate(answers))
    worker_count = max(1, int(workers if workers is not None else (os.cpu_count() or 1)))

    with tqdm(total=len(tasks), desc="Games", disable=not verbose) as progress:
        if worker_count == 1:
            for index, answer in tasks:
                guesser = make_guesser(
                    strategy, wordle.dictionary, frequencies, opening=opening, word=word
                )
                results[index] = wordle.play(answer, guesser)
                progress.update(1)
        else:
            start_methods = mp.get_all_start_methods()
            start_method = "fork" if "fork" in start_methods else "spawn"
            ctx = mp.get_context(start_method)
            with ctx.Pool(
                processes=worker_count,
                initializer=_init_worker,
                initargs=(
                    wordle.dictionary,
                    wordle.max_turns,
                    frequencies,
                    strategy,
                    opening,
                    word,
                ),
            ) as pool:
                for index, turns in pool.imap_unordered(_worker_play, tasks, chunksize=4):
                    results[index] = turns
                    progress.update(1)

    elapsed = time.time() - start

    dist = Counter(turns for turns in results if turns is not None)
    solved = [turns for turns in results if turns is not None]
    failed_words = [answer for answer, turns in zip(answers, results) if turns is None]

    return {
        "total": len(answers),
        "solved": len(solved),
        "average": sum(solved) / len(solved) if solved else 0.0,
        "distribution": dict(sorted(dist.items())),
        "failures": len(failed_words),
        "failed_words": failed_words[:MAX_FAILED_WORDS],
        "turns": list(zip(answers, results)),
        "opening": opening,
        "time": elapsed,
        "rate": len(answers) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results):
    """Pretty print benchmark results."""
    total = results["total"]
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words tested: {total}")
    if results["opening"] is not None:
        print(f"Opening guess: {results['opening']}")
    print(f"Average turns (solved games): {results['average']:.4f}")
    if total:
        print(f"Failures: {results['failures']} ({100 * results['failures'] / total:.2f}%)")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results["distribution"].items():
        pct = 100 * count / total
        bar = "#" * int(pct / 2)
        print(f"  {n:2d}: {count:5d} ({pct:5.2f}%) {bar}")
    if results["failed_words"]:
        print(f"\nFailed words: {results['failed_words']}")
    print("=" * 50)
