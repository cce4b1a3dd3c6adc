"""
entropy.py

Contains entropy calculations over frequency-weighted candidate pools.

A guess splits the pool into groups by the mask each pool word would
produce if it were the answer. Weighting every word by its frequency turns
the group sizes into a probability distribution over masks, and the
Shannon entropy of that distribution is the expected information (bits)
the guess reveals.
"""

from collections import defaultdict

import numpy as np
from numba import njit

from roget.patterns import _mask_code, check, encode_mask


def entropy_from_weights(weights):
    """
    Compute Shannon entropy from bucket weights.

    Buckets are summed smallest first, so two partitions with the same
    shape give bit-identical results whatever order the buckets come in.
    """
    weights = np.asarray(weights, dtype=np.float64)
    weights = np.sort(weights[weights > 0])
    if weights.size == 0:
        return 0.0
    probs = weights / weights.sum()
    return float(-np.sum(probs * np.log2(probs)))


def mask_distribution(guess, pool):
    """
    Probability of each mask code if *guess* is played and the answer is
    drawn from *pool* (word -> weight) proportionally to weight.
    """
    buckets = defaultdict(float)
    for word, weight in pool.items():
        buckets[encode_mask(check(word, guess))] += weight

    total = sum(buckets.values())
    if total == 0:
        return {}
    return {code: weight / total for code, weight in buckets.items() if weight > 0}


def expected_information(guess, pool):
    """Entropy (bits) of the mask distribution *guess* induces on *pool*."""
    return entropy_from_weights(list(mask_distribution(guess, pool).values()))


@njit(cache=True)
def pool_entropies(chars, weights, n_codes):
    """
    Entropy of every pool word used as a guess against the whole pool.

    chars:   (n, size) character codes of the pool words
    weights: (n,) frequency weights of the pool words
    n_codes: number of distinct masks, 3 ** size

    Row i of the implied (n, n) mask table is computed and bucketed on the
    fly, so memory stays O(n + n_codes).
    """
    n = chars.shape[0]
    size = chars.shape[1]
    consumed = np.zeros(size, dtype=np.bool_)
    mask = np.zeros(size, dtype=np.int64)
    buckets = np.zeros(n_codes, dtype=np.float64)
    touched = np.empty(n, dtype=np.int64)
    row_codes = np.empty(n, dtype=np.int64)
    out = np.zeros(n, dtype=np.float64)

    total = 0.0
    for k in range(n):
        total += weights[k]
    if total <= 0.0:
        return out

    for i in range(n):
        touched_n = 0
        for k in range(n):
            code = _mask_code(chars[i], chars[k], consumed, mask)
            row_codes[k] = code
            if buckets[code] == 0.0 and weights[k] > 0.0:
                touched[touched_n] = code
                touched_n += 1
            buckets[code] += weights[k]

        group = np.empty(touched_n, dtype=np.float64)
        for t in range(touched_n):
            group[t] = buckets[touched[t]]
        group = np.sort(group)

        group_total = 0.0
        for t in range(touched_n):
            group_total += group[t]

        entropy = 0.0
        for t in range(touched_n):
            p = group[t] / group_total
            entropy -= p * np.log2(p)
        out[i] = entropy

        # Reset every bucket this row wrote, including zero-weight ones
        for k in range(n):
            buckets[row_codes[k]] = 0.0

    return out
