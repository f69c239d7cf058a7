# src/ellermaze/mapgen/sets.py
# Row-local set labels. Union by overwrite: rows are short, so a merge simply
# rewrites every member of the absorbed set.

from ..grid import Row
from ..rng import PMRandom


def merge_set_with(row: Row, old_set: int, new_set: int) -> None:
    for box in row:
        if box.set == old_set:
            box.set = new_set


def populate_missing_sets(row: Row, rng: PMRandom) -> None:
    """
    Give every unlabeled box a label from 1..len(row) not already in use.
    The free labels are shuffled first so numbering carries no positional bias.
    """
    in_use = {box.set for box in row if box.set is not None}
    available = [s for s in range(1, len(row) + 1) if s not in in_use]
    rng.shuffle(available)

    unlabeled = [box for box in row if box.set is None]
    # Pool size == row width, so there is always a label per unlabeled box.
    for box, label in zip(unlabeled, available):
        box.set = label
