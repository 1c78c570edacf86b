import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

# undirected connection between two point indices
Edge = namedtuple("Edge", ["a", "b", "cost"])


def build_adjacency(vertex_count, edges):
    """
    Build the adjacency map {vertex: [(neighbor, cost), ...]} for an undirected graph.

    - Every vertex in range(vertex_count) gets an entry, isolated ones an empty list.
    - Each edge is stored in both directions with the same cost.
    - Parallel edges are kept as they are; the engine picks the cheaper one.
    - Edges referencing a missing vertex are dropped.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")

    graph = {idx: [] for idx in range(vertex_count)}

    for a, b, cost in edges:
        if a not in graph or b not in graph:
            logger.debug("dropping edge (%s, %s): endpoint out of range", a, b)
            continue
        if cost < 0:
            raise ValueError(f"edge ({a}, {b}) has negative cost {cost}")
        graph[a].append((b, cost))
        graph[b].append((a, cost))  # undirected

    return graph
