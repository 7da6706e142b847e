import pytest

from algorithms import PATHFINDING, list_algorithms
from algorithms.path import missing_endpoints, reconstruct
from cells.grid import Grid
from cells.node import NodeRole, NodeVis

from conftest import make_grid, run_search


SEARCH_KEYS   = [a.key for a in list_algorithms(PATHFINDING)]
SHORTEST_KEYS = [a.key for a in list_algorithms(PATHFINDING) if a.shortest_path]


def path_cells(store):
    return [n.pos for row in store.current() for n in row if n.vis is NodeVis.PATH]


def touches(pos, cells):
    r, c = pos
    return any(abs(r - r2) + abs(c - c2) == 1 for r2, c2 in cells)


def test_registry_lists_the_three_searches():
    assert SEARCH_KEYS == ["bfs", "dfs", "dijkstra"]
    assert SHORTEST_KEYS == ["bfs", "dijkstra"]


@pytest.mark.parametrize("key", SHORTEST_KEYS)
def test_shortest_path_on_an_empty_grid(key):
    store, steps = run_search(key, make_grid((0, 0), (9, 9)))

    assert store.status == "Completed. Path length: 18"
    assert store.log[0] == "Completed. Path length: 18"
    assert len(path_cells(store)) == 17
    assert steps[-1].metrics["path_length"] == 18
    assert steps[-1].metrics["path_found"] is True


@pytest.mark.parametrize("key", SHORTEST_KEYS)
def test_path_length_is_manhattan_distance(key):
    store, _ = run_search(key, make_grid((2, 3), (7, 1)))
    assert store.status == "Completed. Path length: 7"


def test_dfs_finds_a_valid_path_that_may_be_longer():
    store, steps = run_search("dfs", make_grid((0, 0), (9, 9)))

    cells = path_cells(store)
    length = steps[-1].metrics["path_length"]
    assert length >= 18
    assert len(cells) == length - 1
    assert touches((0, 0), cells)
    assert touches((9, 9), cells)
    assert store.status == f"Completed. Path length: {length}"


@pytest.mark.parametrize("key", SEARCH_KEYS)
def test_walled_off_end_reports_no_path(key):
    grid = make_grid((0, 0), (9, 9), barriers=[(8, 9), (9, 8)])
    store, steps = run_search(key, grid)

    assert store.status == "No path found."
    assert store.log[0] == "No path found."
    assert path_cells(store) == []
    assert steps[-1].is_final
    assert steps[-1].metrics["path_found"] is False


@pytest.mark.parametrize("key", SEARCH_KEYS)
def test_barriers_are_never_visited_and_terminals_never_painted(key):
    barriers = [(1, c) for c in range(0, 9)]
    grid = make_grid((0, 0), (9, 0), barriers=barriers)
    store, _ = run_search(key, grid)

    snap = store.current()
    for r, c in barriers:
        assert snap[r][c].role is NodeRole.BARRIER
        assert snap[r][c].vis is NodeVis.NONE
    assert snap[0][0].vis is NodeVis.NONE
    assert snap[9][0].vis is NodeVis.NONE
    assert store.status.startswith("Completed.")


@pytest.mark.parametrize("key", SEARCH_KEYS)
def test_adjacent_start_and_end(key):
    store, _ = run_search(key, make_grid((4, 4), (5, 4)))

    assert store.status == "Completed. Path length: 1"
    assert path_cells(store) == []


def test_bfs_log_follows_the_queue():
    store, _ = run_search("bfs", make_grid((0, 0), (9, 9)))

    log = list(reversed(store.log))
    assert log[:4] == [
        "BFS: enqueued start cell[0][0]",
        "Visiting cell[0][0]",
        "Queued cell[1][0]",
        "Queued cell[0][1]",
    ]
    assert "End found. Backtracking path..." in log
    assert sum(1 for line in log if line.startswith("Path cell")) == 17


def test_dijkstra_logs_relaxations():
    store, _ = run_search("dijkstra", make_grid((0, 0), (9, 9)))

    log = list(reversed(store.log))
    assert log[:3] == [
        "Dijkstra: starting...",
        "Relaxed cell[1][0] with distance 1",
        "Relaxed cell[0][1] with distance 1",
    ]


def test_dfs_goes_down_first():
    store, steps = run_search("dfs", make_grid((0, 0), (9, 9)))

    assert list(reversed(store.log))[0] == "DFS: exploring..."
    first_painted = [pos for s in steps for pos, vis in s.delta.items() if vis == "visited"]
    assert first_painted[:3] == [(1, 0), (2, 0), (3, 0)]


def test_missing_endpoint_messages():
    assert missing_endpoints(Grid()) == "Place a Start and an End first"
    assert missing_endpoints(make_grid(start=None)) == "Place a Start first"
    assert missing_endpoints(make_grid(end=None)) == "Place an End first"
    assert missing_endpoints(make_grid()) is None


def test_reconstruct_excludes_start_and_includes_end():
    parent = {(0, 1): (0, 0), (0, 2): (0, 1)}
    assert reconstruct(parent, (0, 0), (0, 2)) == [(0, 1), (0, 2)]
