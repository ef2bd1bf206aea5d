import pytest

from threatnav.errors import InvalidRequest, Unreachable
from threatnav.planning import DistanceTable, build_distance_table, reconstruct_path
from threatnav.types import GridSpec, NavigationMode


def test_fresh_table_has_one_unvisited_record_per_cell():
    grid = GridSpec(3, 4)
    table = DistanceTable(grid)
    table.seed((1, 2))
    assert len(table) == 12
    assert table.cost((1, 2)) == 0
    assert table.predecessor((1, 2)) == (1, 2)
    unvisited = [cell for cell in grid.cells() if cell != (1, 2)]
    for cell in unvisited:
        record = table.record(cell)
        assert record.cost is None
        assert record.predecessor is None


def test_relax_only_accepts_strict_improvement():
    table = DistanceTable(GridSpec(3, 3))
    assert table.relax((1, 1), 10, (0, 0))
    assert not table.relax((1, 1), 10, (0, 1))
    assert table.predecessor((1, 1)) == (0, 0)
    assert table.relax((1, 1), 4, (1, 0))
    assert table.cost((1, 1)) == 4
    assert table.predecessor((1, 1)) == (1, 0)


def test_lookup_outside_grid_is_invalid():
    table = DistanceTable(GridSpec(2, 2))
    with pytest.raises(InvalidRequest):
        table.cost((2, 0))
    with pytest.raises(InvalidRequest):
        table.predecessor((0, -1))


def test_build_reaches_every_cell_without_threats():
    grid = GridSpec(5, 6)
    table = build_distance_table(grid, (2, 2), (4, 5), NavigationMode.PURSUER)
    assert table.cost((2, 2)) == 0
    assert table.predecessor((2, 2)) == (2, 2)
    assert len(table.reachable()) == grid.size
    assert all(table.is_settled(cell) for cell in grid.cells())


def test_cells_behind_exclusion_wall_stay_unvisited():
    grid = GridSpec(3, 7)
    table = build_distance_table(grid, (1, 0), (1, 6), NavigationMode.EVADER, threats=[(1, 3)])
    assert sorted(table.reachable()) == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
    assert table.record((1, 6)).cost is None
    assert table.predecessor((0, 5)) is None


def test_out_of_bounds_endpoints_are_rejected():
    grid = GridSpec(4, 4)
    with pytest.raises(InvalidRequest):
        build_distance_table(grid, (4, 0), (1, 1), NavigationMode.PURSUER)
    with pytest.raises(InvalidRequest):
        build_distance_table(grid, (0, 0), (1, -1), NavigationMode.EVADER)


def test_identical_inputs_build_identical_tables():
    grid = GridSpec(8, 8)
    args = (grid, (2, 2), (7, 7), NavigationMode.EVADER)
    first = build_distance_table(*args, threats=[(4, 4), (1, 6)])
    second = build_distance_table(*args, threats=[(4, 4), (1, 6)])
    assert first == second
    assert first != build_distance_table(*args, threats=[(5, 5)])


def test_settled_cells_never_improve(monkeypatch):
    relaxations = []
    settled_costs = {}
    original_relax = DistanceTable.relax
    original_settle = DistanceTable.settle

    def recording_relax(self, cell, cost, predecessor):
        was_settled = self.is_settled(cell)
        changed = original_relax(self, cell, cost, predecessor)
        relaxations.append((cell, was_settled, changed))
        return changed

    def recording_settle(self, cell):
        settled_costs[cell] = self.cost(cell)
        original_settle(self, cell)

    monkeypatch.setattr(DistanceTable, "relax", recording_relax)
    monkeypatch.setattr(DistanceTable, "settle", recording_settle)

    table = build_distance_table(
        GridSpec(8, 8), (0, 0), (7, 7), NavigationMode.EVADER, threats=[(3, 4), (6, 1)]
    )
    assert relaxations
    assert not [entry for entry in relaxations if entry[1] and entry[2]]
    for cell, cost in settled_costs.items():
        assert table.cost(cell) == cost


def test_reconstruct_walks_predecessors_forward():
    table = build_distance_table(GridSpec(4, 4), (0, 0), (3, 3), NavigationMode.PURSUER)
    assert reconstruct_path(table, (0, 0), (3, 3)) == [(1, 1), (2, 2), (3, 3)]
    assert reconstruct_path(table, (0, 0), (0, 0)) == []


def test_reconstruct_fails_on_broken_chain():
    table = DistanceTable(GridSpec(3, 3))
    table.seed((0, 0))
    table.relax((2, 2), 7, (1, 1))
    with pytest.raises(Unreachable):
        reconstruct_path(table, (0, 0), (2, 2))
    with pytest.raises(InvalidRequest):
        reconstruct_path(table, (0, 0), (5, 5))
