from pathlib import Path

from butterfly_effect.components import Position
from butterfly_effect.levels.builtin import DEFAULT_LEVELS, GAME_OVER_LAYOUT
from butterfly_effect.levels.layout import (
    border_cells,
    build_grid,
    load_layout_file,
    parse_layout,
)


def test_rows_are_read_bottom_to_top() -> None:
    walls, goals = parse_layout(["W  ", "  T"], width=3, height=2)
    # The first text row is the highest y.
    assert walls == {Position(0, 1)}
    assert goals == {Position(2, 0)}


def test_other_glyphs_are_free() -> None:
    walls, goals = parse_layout(["S.s#x"], width=5, height=1)
    assert walls == set()
    assert goals == set()


def test_offset_shifts_every_cell() -> None:
    walls, goals = parse_layout(["WT"], width=4, height=4, offset=(1, 1))
    assert walls == {Position(1, 1)}
    assert goals == {Position(2, 1)}


def test_short_and_long_rows_are_permissive() -> None:
    rows = [
        "WWWWWWW",  # longer than the grid: extra characters ignored
        "W",  # shorter: missing cells are free
        "",
    ]
    walls, goals = parse_layout(rows, width=3, height=3)
    assert walls == {Position(0, 2), Position(1, 2), Position(2, 2), Position(0, 1)}
    assert goals == set()


def test_extra_rows_are_ignored() -> None:
    walls, _ = parse_layout(["W", "W", "W"], width=1, height=2)
    assert walls == {Position(0, 0), Position(0, 1)}


def test_border_cells_ring() -> None:
    ring = border_cells(4, 3)
    assert len(ring) == 2 * 4 + 2 * 3 - 4
    assert Position(1, 1) not in ring
    assert Position(2, 1) not in ring


def test_build_grid_with_border_fits_interior() -> None:
    grid = build_grid(["   T", "W   "], width=6, height=4, border=True)
    assert grid.goals == {Position(4, 2)}
    assert Position(1, 1) in grid.static_walls
    assert Position(0, 0) in grid.static_walls
    assert Position(5, 3) in grid.static_walls
    assert grid.is_free(Position(2, 1))
    assert len(grid.trail_walls) == 0


def test_build_grid_drops_goals_on_border() -> None:
    grid = build_grid(["TTTTTT"], width=4, height=3, border=True)
    # Only the two interior columns survive.
    assert grid.goals == {Position(1, 1), Position(2, 1)}


def test_builtin_levels_fit_default_arena() -> None:
    for layout in DEFAULT_LEVELS:
        assert len(layout) == 14
        assert all(len(row) == 22 for row in layout)
        grid = build_grid(layout, width=24, height=16, border=True)
        assert len(grid.goals) >= 1
        assert grid.is_free(Position(1, 1))


def test_game_over_layout_has_no_goals() -> None:
    grid = build_grid(GAME_OVER_LAYOUT, width=24, height=16, border=False)
    assert len(grid.goals) == 0
    assert len(grid.static_walls) > 0


def test_load_layout_file_keeps_blank_rows(tmp_path: Path) -> None:
    path = tmp_path / "level.txt"
    path.write_text("W  T\n    \n  W \n", encoding="utf-8")
    rows = load_layout_file(path)
    assert rows == ("W  T", "    ", "  W ")
    walls, goals = parse_layout(rows, width=4, height=3)
    assert goals == {Position(3, 2)}
    assert walls == {Position(0, 2), Position(2, 0)}


def test_build_grid_explicit_offset_without_border() -> None:
    grid = build_grid(["W T"], width=5, height=3, border=False, offset=(1, 1))
    assert set(grid.static_walls) == {Position(1, 1)}
    assert set(grid.goals) == {Position(3, 1)}
    assert Position(0, 0) not in grid.static_walls
