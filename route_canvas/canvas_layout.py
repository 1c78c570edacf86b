import math
from collections import namedtuple

import numpy as np

GRID_ROWS = 4
GRID_COLS = 5
GRID_SPACING = 80
GRID_ORIGIN = (50, 50)
HIT_RADIUS = 10  # pixels around a point that still count as a click on it

Point = namedtuple("Point", ["x", "y"])


def create_grid_points(rows=GRID_ROWS, cols=GRID_COLS, spacing=GRID_SPACING, origin=GRID_ORIGIN):
    """Grid of points in row-major order; the index of a point is its vertex id."""
    start_x, start_y = origin
    points = []
    for r in range(rows):
        for c in range(cols):
            points.append(Point(start_x + c * spacing, start_y + r * spacing))
    return points


def find_clicked_point(points, x, y, radius=HIT_RADIUS):
    """Index of the nearest point strictly inside radius of (x, y), or None."""
    if not points:
        return None
    coords = np.asarray(points, dtype=float)
    gaps = np.hypot(coords[:, 0] - x, coords[:, 1] - y)
    idx = int(np.argmin(gaps))
    if gaps[idx] < radius:
        return idx
    return None


def edge_cost(p, q):
    # integer pixel length, the cost convention of the drawing surface
    return round(math.hypot(q.x - p.x, q.y - p.y))
