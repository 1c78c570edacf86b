import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.patches import Patch

from route_canvas.playback import iter_route_frames

PNG_OUTPUT = "plots/board.png"
GIF_OUTPUT = "plots/route.gif"

ROLE_COLORS = {
    'start': '#FFA500',
    'goal': '#800080',
    'pending': '#FF0000',
    'point': '#000000',
}


def node_role(board, index):
    # pending endpoint first, then start / goal, then a plain point
    if index == board.pending:
        return 'pending'
    if index == board.start:
        return 'start'
    if index in board.goals:
        return 'goal'
    return 'point'


def board_to_networkx(board):
    G = nx.Graph()
    for idx, point in enumerate(board.points):
        G.add_node(idx, pos=(point.x, point.y), role=node_role(board, idx))
    for edge in board.edges:
        if edge.a == edge.b:
            continue
        # parallel edges collapse to the cheapest one, the one routes use
        if G.has_edge(edge.a, edge.b) and G[edge.a][edge.b]['weight'] <= edge.cost:
            continue
        G.add_edge(edge.a, edge.b, weight=edge.cost)
    return G


def _draw_base(board, ax):
    G = board_to_networkx(board)
    # canvas y grows downward
    pos = {n: (x, -y) for n, (x, y) in nx.get_node_attributes(G, 'pos').items()}
    node_colors = [ROLE_COLORS[G.nodes[n]['role']] for n in G.nodes()]

    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=120)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=7, font_color='white')
    nx.draw_networkx_edges(G, pos, ax=ax, edge_color='green', width=2.0)
    edge_labels = {(u, v): d['weight'] for u, v, d in G.edges(data=True)}
    nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=edge_labels, font_size=7)

    legend_elements = [
        Patch(facecolor=color, label=role.capitalize())
        for role, color in ROLE_COLORS.items()
    ]
    ax.legend(handles=legend_elements, loc='upper right', frameon=True, fontsize=7)
    ax.set_facecolor('lightgray')
    return pos


def draw_board(board, route=None, output_link=PNG_OUTPUT):
    fig, ax = plt.subplots(figsize=(8, 6))
    _draw_base(board, ax)

    if route is not None and len(route.path) > 1:
        xs = [board.points[i].x for i in route.path]
        ys = [-board.points[i].y for i in route.path]
        ax.plot(xs, ys, color='red', linewidth=3.0)
        ax.set_title(f"Route to {route.target} (cost {route.distance})", fontsize=11)
    else:
        ax.set_title("Board", fontsize=11)

    fig.tight_layout()
    os.makedirs(os.path.dirname(output_link) or ".", exist_ok=True)
    fig.savefig(output_link)
    plt.close(fig)
    return output_link


def save_route_animation(board, route, output_link=GIF_OUTPUT, interval=50, step=10.0):
    """Animate route playback over the board and save it as a GIF."""
    frames = list(iter_route_frames(board.points, route.path, step=step))

    fig, ax = plt.subplots(figsize=(8, 6))
    _draw_base(board, ax)
    ax.set_title(f"Route to {route.target} (cost {route.distance})", fontsize=11)
    (line,) = ax.plot([], [], color='red', linewidth=3.0)

    def update(frame):
        line.set_data([x for x, _ in frame], [-y for _, y in frame])
        return (line,)

    anim = FuncAnimation(fig, update, frames=frames, interval=interval, blit=True)
    os.makedirs(os.path.dirname(output_link) or ".", exist_ok=True)
    anim.save(output_link, writer=PillowWriter(fps=max(1, round(1000 / interval))))
    plt.close(fig)
    return output_link


if __name__ == "__main__":
    from route_canvas.build_board_demo import build_demo_board

    board = build_demo_board()
    report = board.solve()
    if report.best is None:
        print("No goal is reachable from the start point.")
    else:
        print(f"Saved {draw_board(board, report.best)}")
        print(f"Saved {save_route_animation(board, report.best)}")
