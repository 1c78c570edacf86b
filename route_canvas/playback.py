import math


def route_polyline(points, path):
    return [(points[i].x, points[i].y) for i in path]


def iter_route_frames(points, path, step=10.0):
    """
    Yield the route drawn progressively.

    Each frame is a polyline starting at the first vertex of path and reaching
    `step` pixels further along the route than the previous frame. The last
    frame is always the full route.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    line = route_polyline(points, path)
    if len(line) < 2:
        yield list(line)
        return

    drawn = [line[0]]
    for (x0, y0), (x1, y1) in zip(line, line[1:]):
        length = math.hypot(x1 - x0, y1 - y0)
        n_steps = max(1, math.ceil(length / step))
        for k in range(1, n_steps):
            yield drawn + [(x0 + (x1 - x0) * k / n_steps, y0 + (y1 - y0) * k / n_steps)]
        drawn = drawn + [(x1, y1)]
        yield list(drawn)
