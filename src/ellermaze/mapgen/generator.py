# src/ellermaze/mapgen/generator.py
# Row-by-row Eller's construction: label, merge sideways, drop exits, repeat;
# the last row is force-merged into one set.

import logging
from typing import Optional

from ..config import DEFAULTS
from ..errors import InvalidDimension, InvalidProbability
from ..grid import Maze, empty_box_grid
from ..rng import SeedValue, make_rng
from .exits import add_set_exits
from .merge import merge_random_sets_in
from .sets import populate_missing_sets

log = logging.getLogger(__name__)


def _check_dimension(name: str, value: object) -> int:
    # bool is an int subclass; True as a width is a caller bug.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(name, value)
    return value


def _check_probability(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
        raise InvalidProbability(value)
    return float(value)


def generate_maze(
    width: int = DEFAULTS.width,
    height: Optional[int] = None,
    closed: bool = DEFAULTS.closed,
    seed: Optional[SeedValue] = None,
    *,
    merge_probability: Optional[float] = None,
) -> Maze:
    """
    Build a perfect width×height maze.

    height defaults to width. The same non-None seed always yields the same
    maze; seed=None draws a fresh one. merge_probability applies to every row
    except the last, which always merges completely.
    """
    width = _check_dimension("width", width)
    height = _check_dimension("height", width if height is None else height)
    probability = _check_probability(
        DEFAULTS.merge_probability if merge_probability is None else merge_probability
    )

    rng = make_rng(seed)
    log.debug("generating %dx%d maze closed=%s state=%d", width, height, closed, rng.state)

    maze = empty_box_grid(width, height, closed)

    for y, row in enumerate(maze[:-1]):
        populate_missing_sets(row, rng)
        merges = merge_random_sets_in(row, rng, probability)
        exits = add_set_exits(row, maze[y + 1], rng)
        log.debug("row %d: merges=%d exits=%d", y, merges, exits)

    last_row = maze[-1]
    populate_missing_sets(last_row, rng)
    merges = merge_random_sets_in(last_row, rng, DEFAULTS.last_row_probability)
    log.debug("row %d (last): merges=%d", height - 1, merges)

    return Maze.from_boxes(maze)
