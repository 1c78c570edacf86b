from route_canvas.canvas_layout import Point, create_grid_points, edge_cost, find_clicked_point


def test_grid_row_major_order():
    points = create_grid_points()

    assert len(points) == 20
    assert points[0] == Point(50, 50)
    assert points[1] == Point(130, 50)
    assert points[5] == Point(50, 130)
    assert points[-1] == Point(370, 290)


def test_custom_grid():
    points = create_grid_points(rows=2, cols=2, spacing=10, origin=(0, 0))
    assert points == [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]


def test_click_hit_and_miss():
    points = create_grid_points()

    assert find_clicked_point(points, 52, 48) == 0
    assert find_clicked_point(points, 135, 134) == 6
    assert find_clicked_point(points, 90, 90) is None
    # radius is exclusive
    assert find_clicked_point(points, 60, 50) is None
    assert find_clicked_point([], 0, 0) is None


def test_edge_cost_is_rounded_length():
    assert edge_cost(Point(50, 50), Point(130, 50)) == 80
    assert edge_cost(Point(50, 50), Point(130, 130)) == 113
    assert edge_cost(Point(0, 0), Point(0, 0)) == 0
