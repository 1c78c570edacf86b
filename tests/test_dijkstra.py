import math

import networkx as nx
import pytest

from route_canvas.pathfinding.dijkstra import (
    INF,
    Route,
    dijkstra,
    find_routes,
    reconstruct_path,
    select_best_route,
    shortest_paths,
)
from route_canvas.pathfinding.graph_builder import build_adjacency

# four points in a line plus an isolated one, chain vs direct shortcut
LINE_EDGES = [(0, 1, 10), (1, 2, 10), (2, 3, 10), (0, 3, 35)]

MESH_EDGES = [
    (0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
    (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9), (6, 7, 1),
]


def path_cost(adjacency, path):
    total = 0
    for u, v in zip(path[:-1], path[1:]):
        total += min(cost for n, cost in adjacency[u] if n == v)
    return total


def test_line_distances_and_path():
    graph = build_adjacency(5, LINE_EDGES)
    dist, parent = shortest_paths(0, graph)

    assert dist == {0: 0, 1: 10, 2: 20, 3: 30, 4: INF}
    assert reconstruct_path(parent, 0, 3) == [0, 1, 2, 3]
    assert reconstruct_path(parent, 0, 4) is None


def test_parallel_edges_use_cheaper_one():
    for edges in ([(0, 1, 5), (0, 1, 3)], [(0, 1, 3), (0, 1, 5)]):
        dist, _ = shortest_paths(0, build_adjacency(2, edges))
        assert dist[1] == 3


def test_source_equals_target():
    dist, parent = shortest_paths(2, build_adjacency(5, LINE_EDGES))
    assert dist[2] == 0
    assert parent[2] is None
    assert reconstruct_path(parent, 2, 2) == [2]


def test_invalid_source_is_all_unreachable():
    graph = build_adjacency(3, [(0, 1, 1)])
    for source in (None, 7, -1):
        dist, parent = shortest_paths(source, graph)
        assert all(math.isinf(d) for d in dist.values())
        assert all(p is None for p in parent.values())


def test_reconstruct_path_out_of_range_target():
    _, parent = shortest_paths(0, build_adjacency(3, [(0, 1, 1)]))
    with pytest.raises(IndexError):
        reconstruct_path(parent, 0, 3)


def test_relaxation_fixed_point_and_path_costs():
    graph = build_adjacency(8, MESH_EDGES)
    dist, parent = shortest_paths(0, graph)

    assert dist[0] == 0
    for u, neighbors in graph.items():
        for v, cost in neighbors:
            assert dist[v] <= dist[u] + cost

    for target, d in dist.items():
        path = reconstruct_path(parent, 0, target)
        if math.isinf(d):
            assert path is None
        else:
            assert path[0] == 0 and path[-1] == target
            assert path_cost(graph, path) == d


def test_matches_networkx_reference():
    graph = build_adjacency(8, MESH_EDGES)
    G = nx.Graph()
    G.add_nodes_from(range(8))
    for a, b, cost in MESH_EDGES:
        G.add_edge(a, b, weight=cost)

    expected = nx.single_source_dijkstra_path_length(G, 0, weight='weight')
    dist, _ = shortest_paths(0, graph)

    assert {n: d for n, d in dist.items() if not math.isinf(d)} == expected
    assert math.isinf(dist[6]) and math.isinf(dist[7])


def test_repeated_queries_are_identical():
    graph = build_adjacency(8, MESH_EDGES)
    first = shortest_paths(3, graph)
    second = shortest_paths(3, graph)
    assert first == second
    assert first[0] is not second[0]


def test_select_best_route():
    assert select_best_route([]) is None

    a = Route(3, (0, 1, 3), 20)
    b = Route(4, (0, 4), 20)
    c = Route(5, (0, 5), 25)
    assert select_best_route([c, a, b]) is a
    assert select_best_route([c, b, a]) is b


def test_find_routes_skips_unreachable_goals():
    graph = build_adjacency(5, LINE_EDGES)
    routes = find_routes(graph, 0, [4, 3, 0])

    assert routes == [Route(3, (0, 1, 2, 3), 30), Route(0, (0,), 0)]
    assert find_routes(graph, None, [3]) == []


def test_dijkstra_single_query():
    graph = build_adjacency(5, LINE_EDGES)
    assert dijkstra(graph, 0, 3) == ([0, 1, 2, 3], 30)
    assert dijkstra(graph, 0, 4) == (None, INF)
