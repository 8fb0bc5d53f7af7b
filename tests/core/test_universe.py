import pytest

from lifesim.core.cell import Cell
from lifesim.core.exceptions import GridBoundsError, GridSizeError
from lifesim.core.templates import GRIDER_GUN_POINTS
from lifesim.core.universe import Universe, next_state

GLIDER = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
BLOCK = [(1, 1), (1, 2), (2, 1), (2, 2)]


class TestConstruction:
    def test_default_universe_is_128_square_and_dead(self):
        universe = Universe()

        assert universe.width == 128
        assert universe.height == 128
        assert len(universe.get_cells()) == 128 * 128
        assert universe.population == 0

    def test_custom_size(self):
        universe = Universe(width=7, height=3)

        assert (universe.width, universe.height) == (7, 3)
        assert len(universe.get_cells()) == 21

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 3)])
    def test_invalid_size_rejected(self, width, height):
        with pytest.raises(GridSizeError):
            Universe(width=width, height=height)

    def test_get_index_is_row_major(self):
        universe = Universe(width=5, height=4)

        assert universe.get_index(0, 0) == 0
        assert universe.get_index(2, 3) == 13
        assert universe.get_index(3, 4) == 19


class TestResize:
    def test_set_width_clears_cells(self, small_universe):
        universe = small_universe(cells=BLOCK)

        universe.set_width(9)

        assert universe.width == 9
        assert universe.height == 6
        assert len(universe.get_cells()) == 54
        assert universe.population == 0

    def test_set_height_clears_cells(self, small_universe):
        universe = small_universe(cells=BLOCK)

        universe.set_height(4)

        assert universe.height == 4
        assert len(universe.get_cells()) == 24
        assert universe.population == 0

    def test_zero_dimension_rejected(self, small_universe):
        universe = small_universe(cells=BLOCK)

        with pytest.raises(GridSizeError) as exc_info:
            universe.set_width(0)

        assert exc_info.value.dimension == "width"
        # Rejected before any state change
        assert universe.width == 6
        assert universe.population == 4

    def test_reset_cells_keeps_size(self, small_universe):
        universe = small_universe(width=4, height=5, cells=[(0, 0), (4, 3)])

        universe.reset_cells()

        assert (universe.width, universe.height) == (4, 5)
        assert universe.population == 0


class TestNeighbors:
    def test_interior_count(self, small_universe):
        universe = small_universe(cells=BLOCK)

        assert universe.live_neighbor_count(1, 1) == 3
        assert universe.live_neighbor_count(0, 0) == 1
        assert universe.live_neighbor_count(3, 3) == 1
        assert universe.live_neighbor_count(5, 5) == 0

    def test_corners_wrap_around(self, small_universe):
        universe = small_universe(width=5, height=5, cells=[(4, 4)])
        assert universe.live_neighbor_count(0, 0) == 1

        universe = small_universe(width=5, height=5, cells=[(0, 0)])
        assert universe.live_neighbor_count(4, 4) == 1

    def test_edges_wrap_around(self, small_universe):
        universe = small_universe(width=5, height=5, cells=[(2, 4), (4, 2)])

        assert universe.live_neighbor_count(2, 0) == 1
        assert universe.live_neighbor_count(0, 2) == 1

    def test_full_neighborhood(self, small_universe):
        cells = [(r, c) for r in range(3) for c in range(3)]
        universe = small_universe(cells=cells)

        assert universe.live_neighbor_count(1, 1) == 8


class TestRule:
    @pytest.mark.parametrize("count", range(9))
    def test_dead_cell(self, count):
        expected = Cell.ALIVE if count == 3 else Cell.DEAD
        assert next_state(Cell.DEAD, count) is expected

    @pytest.mark.parametrize("count", range(9))
    def test_live_cell(self, count):
        expected = Cell.ALIVE if count in (2, 3) else Cell.DEAD
        assert next_state(Cell.ALIVE, count) is expected


class TestTick:
    def test_block_is_still_life(self, small_universe):
        universe = small_universe(cells=BLOCK)

        for _ in range(5):
            universe.tick()

        assert universe.live_cells() == BLOCK

    def test_blinker_has_period_two(self, small_universe):
        horizontal = [(2, 1), (2, 2), (2, 3)]
        vertical = [(1, 2), (2, 2), (3, 2)]
        universe = small_universe(width=5, height=5, cells=horizontal)

        universe.tick()
        assert universe.live_cells() == vertical

        universe.tick()
        assert universe.live_cells() == horizontal

    def test_birth_with_three_neighbors(self, small_universe):
        universe = small_universe(cells=[(1, 1), (1, 2), (2, 1)])

        universe.tick()

        assert universe.get_cells().get(universe.get_index(2, 2)) is Cell.ALIVE
        assert universe.live_cells() == BLOCK

    def test_lonely_cells_die(self, small_universe):
        universe = small_universe(cells=[(0, 0), (3, 3)])

        universe.tick()

        assert universe.population == 0

    def test_overcrowded_center_dies(self, small_universe):
        plus = [(1, 2), (2, 1), (2, 2), (2, 3), (3, 2)]
        universe = small_universe(cells=plus)

        universe.tick()

        assert universe.get_cells().get(universe.get_index(2, 2)) is Cell.DEAD

    def test_glider_wraps_around_torus(self, small_universe):
        universe = small_universe(width=8, height=8, cells=GLIDER)

        for _ in range(4):
            universe.tick()
        assert universe.live_cells() == sorted((r + 1, c + 1) for r, c in GLIDER)

        for _ in range(28):
            universe.tick()
        assert universe.live_cells() == sorted(GLIDER)

    def test_tick_is_deterministic(self, small_universe):
        seed = GLIDER + [(5, 5), (5, 6), (5, 7), (7, 0)]
        first = small_universe(width=10, height=9, cells=seed)
        second = small_universe(width=10, height=9, cells=seed)

        for _ in range(12):
            first.tick()
            second.tick()
            assert first.get_cells() == second.get_cells()

    def test_tick_replaces_grid(self, small_universe):
        universe = small_universe(cells=BLOCK)
        before = universe.get_cells()

        universe.tick()

        assert universe.get_cells() is not before
        assert universe.get_cells() == before

    def test_failed_tick_leaves_state_untouched(self, small_universe, monkeypatch):
        universe = small_universe(width=5, height=5, cells=[(2, 1), (2, 2), (2, 3)])
        snapshot = universe.get_cells().clone()

        def explode(cell, count):
            raise RuntimeError("boom")

        monkeypatch.setattr("lifesim.core.universe.next_state", explode)
        with pytest.raises(RuntimeError):
            universe.tick()

        assert universe.get_cells() == snapshot


class TestSeeding:
    def test_set_cells_is_additive(self, small_universe):
        universe = small_universe(cells=[(0, 0)])

        universe.set_cells([(1, 1), (0, 0)])

        assert universe.live_cells() == [(0, 0), (1, 1)]

    @pytest.mark.parametrize("point", [(6, 0), (0, 6), (-1, 2), (2, -1)])
    def test_set_cells_out_of_bounds(self, small_universe, point):
        universe = small_universe()

        with pytest.raises(GridBoundsError) as exc_info:
            universe.set_cells([(1, 1), point])

        assert exc_info.value.details["row"] == point[0]
        assert exc_info.value.details["col"] == point[1]
        # Nothing written when any coordinate is bad
        assert universe.population == 0

    def test_grider_gun_template(self):
        universe = Universe()
        universe.set_cells([(50, 50)])

        universe.set_template("GriderGun")

        assert len(GRIDER_GUN_POINTS) == 72
        assert set(universe.live_cells()) == set(GRIDER_GUN_POINTS)
        assert universe.population == 72
        expected = {universe.get_index(r, c) for r, c in GRIDER_GUN_POINTS}
        assert set(universe.get_cells().ones()) == expected

    def test_unknown_template_leaves_grid_empty(self, small_universe):
        universe = small_universe(cells=BLOCK)

        universe.set_template("NoSuchPattern")

        assert universe.population == 0

    def test_grider_gun_needs_large_grid(self, small_universe):
        universe = small_universe(width=40, height=40)

        with pytest.raises(GridBoundsError):
            universe.set_template("GriderGun")

    def test_custom_registry(self, registry):
        registry.register("Pair", [(0, 0), (0, 1)])
        universe = Universe(width=4, height=4, templates=registry)

        universe.set_template("Pair")
        assert universe.live_cells() == [(0, 0), (0, 1)]

        # Built-in templates are not visible through a private registry
        universe.set_template("GriderGun")
        assert universe.population == 0

    @pytest.mark.slow
    def test_grider_gun_runs_deterministically(self):
        first = Universe()
        second = Universe()
        first.set_template("GriderGun")
        second.set_template("GriderGun")

        for _ in range(3):
            first.tick()
            second.tick()

        assert first.get_cells() == second.get_cells()
        assert first.population > 0


class TestRender:
    def test_round_trip_layout(self, small_universe):
        universe = small_universe(width=5, height=5, cells=[(1, 1), (1, 2), (2, 1)])

        rendered = universe.render()
        rows = rendered.split("\n")

        assert rendered.endswith("\n")
        assert rows[-1] == ""
        assert len(rows[:-1]) == 5
        assert rows[1] == "□■■□□"
        assert rows[2] == "□■□□□"
        assert rows[0] == rows[3] == rows[4] == "□□□□□"

    def test_render_non_square(self, small_universe):
        universe = small_universe(width=3, height=2, cells=[(0, 2), (1, 0)])

        assert universe.render() == "□□■\n■□□\n"
        assert str(universe) == universe.render()

    def test_render_custom_symbols(self, small_universe):
        universe = small_universe(width=3, height=1, cells=[(0, 1)])

        assert universe.render(alive="#", dead=".") == ".#.\n"
