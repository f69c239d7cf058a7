import pytest

from ellermaze.grid import BOTTOM, LEFT, RIGHT, TOP, Cell, Maze, empty_box_grid


def test_closed_grid_all_walls_up():
    g = empty_box_grid(3, 2, closed=True)
    assert len(g) == 2 and all(len(r) == 3 for r in g)
    for y, row in enumerate(g):
        for x, b in enumerate(row):
            assert (b.x, b.y) == (x, y)
            assert b.top and b.right and b.bottom and b.left
            assert b.set is None

def test_open_grid_only_rim_open():
    g = empty_box_grid(3, 3, closed=False)
    assert not any(b.top for b in g[0])
    assert not any(b.bottom for b in g[-1])
    assert not any(row[0].left for row in g)
    assert not any(row[-1].right for row in g)
    mid = g[1][1]
    assert mid.top and mid.right and mid.bottom and mid.left

def test_single_cell_open_grid():
    (row,) = empty_box_grid(1, 1, closed=False)
    b = row[0]
    assert not (b.top or b.right or b.bottom or b.left)

def test_maze_copy_hides_labels_and_is_independent():
    g = empty_box_grid(2, 1)
    g[0][0].set = 4
    m = Maze.from_boxes(g)
    g[0][0].right = False
    assert m[0][0].right is True
    assert not hasattr(m[0][0], "set")
    with pytest.raises(AttributeError):
        m[0][0].top = False

def test_cell_mask_bits():
    c = Cell(0, 0, top=True, right=False, bottom=True, left=False)
    assert c.mask() == TOP | BOTTOM
    assert c.walls == (True, False, True, False)
    assert Cell(0, 0, False, True, False, True).mask() == RIGHT | LEFT

def test_cell_lookup_bounds():
    m = Maze.from_boxes(empty_box_grid(2, 3))
    assert (m.width, m.height) == (2, 3)
    assert m.cell(1, 2) is m[2][1]
    with pytest.raises(IndexError):
        m.cell(2, 0)
    with pytest.raises(IndexError):
        m.cell(0, -1)

def test_open_neighbors_respect_walls():
    g = empty_box_grid(2, 2, closed=False)
    g[0][0].right = g[0][1].left = False
    m = Maze.from_boxes(g)
    # rim is open, but there is nothing beyond it to step into
    assert list(m.open_neighbors(0, 0)) == [(1, 0)]
    assert list(m.open_neighbors(0, 1)) == []
