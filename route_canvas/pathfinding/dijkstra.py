import heapq
import math
from dataclasses import dataclass

INF = math.inf


@dataclass(frozen=True)
class Route:
    target: int
    path: tuple
    distance: float


def shortest_paths(source, adjacency):
    """
    Single-source Dijkstra over an adjacency map built by build_adjacency.

    Returns (dist, parent). Unreached vertices keep INF / None. A source that
    is not in the adjacency map gives an all-unreachable result.
    """
    dist = {node: INF for node in adjacency}  # initial value is INF for every node
    parent = {node: None for node in adjacency}

    if source not in adjacency:
        return dist, parent

    dist[source] = 0
    visited = set()
    pq = [(0, source)]  # (distance, node)

    while pq:
        current_dist, node = heapq.heappop(pq)

        # skip outdated elements and settled nodes
        if node in visited or current_dist > dist[node]:
            continue
        visited.add(node)

        for neighbor, weight in adjacency[node]:
            new_dist = current_dist + weight
            if dist[neighbor] > new_dist:  # dv > du + w
                dist[neighbor] = new_dist
                parent[neighbor] = node
                heapq.heappush(pq, (new_dist, neighbor))

    return dist, parent


def reconstruct_path(parent, source, target):
    """
    Walk parent links back from target. Returns [source, ..., target], or None
    when the walk runs out before reaching source (target unreachable).
    """
    for node in (source, target):
        if node not in parent:
            raise IndexError(f"vertex {node} is not in the predecessor table")

    path = []
    node = target
    while node is not None:
        path.append(node)
        if node == source:
            path.reverse()
            return path
        node = parent[node]
    return None


def select_best_route(candidates):
    # min() keeps the first of equal elements, so earlier goals win ties
    return min(candidates, key=lambda route: route.distance, default=None)


def find_routes(adjacency, source, goals):
    """Route for every reachable goal, in goal order."""
    dist, parent = shortest_paths(source, adjacency)
    if source not in adjacency:
        return []

    routes = []
    for goal in goals:
        path = reconstruct_path(parent, source, goal)
        if path is not None:
            routes.append(Route(goal, tuple(path), dist[goal]))
    return routes


def dijkstra(graph, src, dst):
    dist, parent = shortest_paths(src, graph)
    if src not in graph:
        return None, INF
    return reconstruct_path(parent, src, dst), dist[dst]


if __name__ == "__main__":
    from route_canvas.pathfinding.graph_builder import build_adjacency

    # demo: four points in a line, the chain beats the direct edge
    graph = build_adjacency(5, [(0, 1, 10), (1, 2, 10), (2, 3, 10), (0, 3, 35)])
    path, cost = dijkstra(graph, 0, 3)
    print("Shortest path:", path)
    print("Total cost:", cost)
