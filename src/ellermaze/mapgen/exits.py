# src/ellermaze/mapgen/exits.py

import math
from typing import Dict, List

from ..grid import Box, Row
from ..rng import PMRandom


def group_by_set(row: Row) -> List[List[Box]]:
    """Boxes grouped by label, groups in order of first appearance."""
    groups: Dict[int, List[Box]] = {}
    for box in row:
        groups.setdefault(box.set, []).append(box)
    return list(groups.values())


def add_set_exits(row: Row, next_row: Row, rng: PMRandom) -> int:
    """
    Open at least one downward passage per set and carry its label into next_row.
    Returns the number of exits carved.
    """
    exits_carved = 0
    for group in group_by_set(row):
        # random() is never 0, so ceil() already gives >= 1; max() keeps that explicit.
        count = max(1, math.ceil(rng.random() * len(group)))
        for exit_box in rng.sample(group, count):
            below = next_row[exit_box.x]
            exit_box.bottom = False
            below.top = False
            below.set = exit_box.set
            exits_carved += 1
    return exits_carved
