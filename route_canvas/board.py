import logging
from dataclasses import dataclass, field

from route_canvas.canvas_layout import create_grid_points, edge_cost, find_clicked_point
from route_canvas.pathfinding.dijkstra import find_routes, select_best_route
from route_canvas.pathfinding.graph_builder import Edge, build_adjacency

logger = logging.getLogger(__name__)

MODES = ("start", "goal", "path")


@dataclass
class RouteReport:
    routes: list = field(default_factory=list)  # one Route per reachable goal
    best: object = None
    unreachable: list = field(default_factory=list)


class Board:
    """
    Interaction state of the drawing surface.

    Owns the points, the drawn edges, the start point and the goal list.
    Every query rebuilds the graph from the edge list; nothing about the
    graph itself is cached between calls.
    """

    def __init__(self, points=None, mode="start"):
        self.points = list(points) if points is not None else create_grid_points()
        self.edges = []
        self.start = None
        self.goals = []
        self.pending = None  # first endpoint of an edge being drawn
        self.last_report = None
        self.set_mode(mode)

    def set_mode(self, mode):
        if mode not in MODES:
            raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")
        self.mode = mode
        self.pending = None

    def _check_index(self, index):
        if not 0 <= index < len(self.points):
            raise IndexError(f"point {index} out of range (0..{len(self.points) - 1})")

    # --- selection -----------------------------------------------------------

    def click(self, x, y):
        """Hit-test (x, y) and apply the current mode. Returns the point index or None."""
        index = find_clicked_point(self.points, x, y)
        if index is not None:
            self.select(index)
        return index

    def select(self, index):
        self._check_index(index)
        if self.mode == "start":
            self.set_start(index)
        elif self.mode == "goal":
            self.toggle_goal(index)
        elif self.pending is None:
            self.pending = index
        else:
            a, self.pending = self.pending, None
            self.add_edge(a, index)
            self.solve()

    def set_start(self, index):
        self._check_index(index)
        self.start = index

    def toggle_goal(self, index):
        self._check_index(index)
        if index in self.goals:
            self.goals.remove(index)
        else:
            self.goals.append(index)

    def add_edge(self, a, b, cost=None):
        self._check_index(a)
        self._check_index(b)
        if cost is None:
            cost = edge_cost(self.points[a], self.points[b])
        edge = Edge(a, b, cost)
        self.edges.append(edge)
        return edge

    def clear_edges(self):
        self.edges.clear()
        self.pending = None
        self.last_report = None

    def reset(self):
        self.clear_edges()
        self.start = None
        self.goals.clear()

    # --- queries -------------------------------------------------------------

    def adjacency(self):
        return build_adjacency(len(self.points), self.edges)

    def solve(self):
        """Shortest route to every goal plus the best one among them."""
        report = RouteReport()
        if self.start is None:
            logger.info("no start point selected")
            report.unreachable = list(self.goals)
            self.last_report = report
            return report

        report.routes = find_routes(self.adjacency(), self.start, self.goals)
        reached = {route.target for route in report.routes}
        for goal in self.goals:
            if goal in reached:
                logger.info("goal %d reachable from %d", goal, self.start)
            else:
                logger.info("goal %d unreachable from %d", goal, self.start)
                report.unreachable.append(goal)

        report.best = select_best_route(report.routes)
        self.last_report = report
        return report
