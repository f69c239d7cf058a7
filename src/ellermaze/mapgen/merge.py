# src/ellermaze/mapgen/merge.py

from ..grid import Row
from ..rng import PMRandom
from .sets import merge_set_with


def merge_random_sets_in(row: Row, rng: PMRandom, probability: float = 0.5) -> int:
    """
    Walk adjacent pairs left to right and join differing sets with the given odds.

    One draw is taken per pair whether or not it is used, so a row always
    consumes len(row) - 1 values from the stream. Returns the number of merges.
    """
    merges = 0
    for x in range(len(row) - 1):
        current, nxt = row[x], row[x + 1]
        should_merge = rng.random() <= probability
        if current.set == nxt.set or not should_merge:
            # Same set means already connected; a passage here would form a loop.
            continue
        merge_set_with(row, nxt.set, current.set)
        current.right = False
        nxt.left = False
        merges += 1
    return merges
