from route_canvas.board import Board
from route_canvas.canvas_layout import create_grid_points


def build_demo_board():
    """
    Five points in a row:
    - 0-1-2-3 chained with cost 10 each, plus a direct 0-3 shortcut of cost 35
    - point 4 has no edges
    - start at 0, goals 3 and 4
    """
    board = Board(points=create_grid_points(rows=1, cols=5))

    board.add_edge(0, 1, 10)
    board.add_edge(1, 2, 10)
    board.add_edge(2, 3, 10)
    board.add_edge(0, 3, 35)

    board.set_start(0)
    board.toggle_goal(3)
    board.toggle_goal(4)
    return board


def build_grid_demo_board():
    """Default 4x5 grid with a few drawn roads and two goals."""
    board = Board()

    # top row road, then down the right side
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (4, 9), (9, 14), (14, 19)]:
        board.add_edge(a, b)
    # diagonal shortcut from the start towards the bottom row
    for a, b in [(0, 6), (6, 12), (12, 18)]:
        board.add_edge(a, b)
    board.add_edge(18, 19)

    board.set_start(0)
    board.toggle_goal(19)
    board.toggle_goal(15)
    return board


if __name__ == "__main__":
    board = build_demo_board()
    report = board.solve()
    for route in report.routes:
        print(f"Goal {route.target}: {list(route.path)} (total cost {route.distance})")
    for goal in report.unreachable:
        print(f"Goal {goal}: not connected")
    if report.best is not None:
        print(f"Best route -> {report.best.target}")
