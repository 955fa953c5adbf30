import pytest

from butterfly_effect.components import Position
from butterfly_effect.grid import GridState
from tests.test_utils import make_grid, positions


def test_free_cells_exclude_every_wall_kind() -> None:
    grid = make_grid(
        width=3, height=3, walls=[(0, 0)], settled=[(1, 1)], trail=[(2, 2)]
    )
    free = set(grid.free_cells())
    assert len(free) == 6
    for pos in positions([(0, 0), (1, 1), (2, 2)]):
        assert not grid.is_free(pos)
        assert grid.is_wall(pos)


def test_out_of_bounds_is_not_free() -> None:
    grid = make_grid(width=3, height=3)
    assert not grid.is_free(Position(-1, 0))
    assert not grid.is_free(Position(3, 0))
    assert not grid.is_free(Position(0, 3))
    assert grid.is_free(Position(2, 2))


def test_goals_on_walls_rejected() -> None:
    with pytest.raises(ValueError):
        make_grid(walls=[(2, 2)], goals=[(2, 2)])


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_size_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        GridState(width=width, height=height)


def test_add_trail_wall_preserves_order() -> None:
    grid = make_grid()
    grid = grid.add_trail_wall(Position(3, 1)).add_trail_wall(Position(1, 3))
    assert list(grid.trail_walls) == positions([(3, 1), (1, 3)])


@pytest.mark.parametrize(
    "coord",
    [(0, 0), (1, 1), (2, 2), (9, 9)],
)
def test_add_trail_wall_on_occupied_cell_raises(coord: tuple[int, int]) -> None:
    grid = make_grid(walls=[(0, 0)], settled=[(1, 1)], trail=[(2, 2)])
    with pytest.raises(ValueError):
        grid.add_trail_wall(Position(*coord))


def test_settle_moves_trail_walls_to_settled() -> None:
    grid = make_grid(trail=[(2, 2), (3, 2)], settled=[(1, 3)])
    settled = grid.settle_trail_walls()
    assert len(settled.trail_walls) == 0
    assert set(settled.settled_walls) == set(positions([(2, 2), (3, 2), (1, 3)]))
    # Undo after settling frees nothing.
    assert settled.clear_trail_walls().settled_walls == settled.settled_walls


def test_clear_trail_walls_keeps_static_and_settled() -> None:
    grid = make_grid(walls=[(0, 0)], trail=[(2, 2)], settled=[(1, 3)])
    cleared = grid.clear_trail_walls()
    assert cleared.is_free(Position(2, 2))
    assert cleared.static_walls == grid.static_walls
    assert cleared.settled_walls == grid.settled_walls
    assert cleared.goals == grid.goals
