import streamlit as st
import pandas as pd
from pyvis.network import Network
import streamlit.components.v1 as components
import os, sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from route_canvas.board import Board, MODES
from route_canvas.build_board_demo import build_grid_demo_board
from route_canvas.visualize_board import ROLE_COLORS, node_role

# ==========================================
# 1. PAGE CONFIG
# ==========================================
st.set_page_config(
    layout="wide",
    page_title="Route Canvas",
    initial_sidebar_state="expanded"
)

HTML_PATH = "data/board_vis.html"
os.makedirs("data", exist_ok=True)

MODE_LABELS = {
    "start": "Set start point",
    "goal": "Toggle goal point",
    "path": "Draw road (two points)",
}

# ==========================================
# 2. UTILITIES
# ==========================================
def pyvis_board(board, report=None):
    net = Network(height="520px", width="100%", bgcolor="#d3d3d3", font_color="black")

    # 1. Nodes pinned to their grid position
    for idx, point in enumerate(board.points):
        role = node_role(board, idx)
        net.add_node(idx, label=str(idx), title=f"{idx} ({role})", color=ROLE_COLORS[role],
                     x=point.x, y=point.y, physics=False, size=10)

    # 2. Edges on the best route are highlighted
    best_edges = set()
    if report is not None and report.best is not None:
        path = report.best.path
        best_edges = {frozenset(pair) for pair in zip(path[:-1], path[1:])}

    for edge in board.edges:
        if frozenset([edge.a, edge.b]) in best_edges:
            net.add_edge(edge.a, edge.b, title=str(edge.cost), color="#ff4b4b", width=5)
        else:
            net.add_edge(edge.a, edge.b, title=str(edge.cost), color="green", width=2)

    net.toggle_physics(False)
    net.save_graph(HTML_PATH)
    return HTML_PATH


def routes_frame(report):
    rows = []
    for route in report.routes:
        rows.append({
            "Best": "✅" if route == report.best else "",
            "Goal": route.target,
            "Route": " → ".join(str(n) for n in route.path),
            "Cost": route.distance,
            "Hops": len(route.path) - 1,
        })
    for goal in report.unreachable:
        rows.append({"Best": "", "Goal": goal, "Route": "not connected", "Cost": None, "Hops": None})
    return pd.DataFrame(rows)


# ==========================================
# 3. MAIN DASHBOARD LOGIC
# ==========================================
if 'board' not in st.session_state:
    st.session_state['board'] = Board()

board = st.session_state['board']

with st.sidebar:
    st.title("Control Panel")

    with st.container(border=True):
        st.caption("Board")
        col_reset, col_demo = st.columns(2)
        with col_reset:
            if st.button("Clear", use_container_width=True):
                board.reset()
                st.rerun()
        with col_demo:
            if st.button("Load demo", use_container_width=True):
                st.session_state['board'] = build_grid_demo_board()
                st.rerun()

    with st.form("select_form"):
        mode = st.radio("Mode", MODES, index=MODES.index(board.mode),
                        format_func=MODE_LABELS.get)
        point = st.selectbox("Point", range(len(board.points)))
        if board.pending is not None:
            st.info(f"Road started at point {board.pending}")
        submitted = st.form_submit_button("Apply", type="primary", use_container_width=True)

    if submitted:
        try:
            if mode != board.mode:
                board.set_mode(mode)
            board.select(point)
        except (IndexError, ValueError) as e:
            st.error(str(e))
        else:
            st.rerun()

report = board.solve()

# --- Main content ---
st.title("Route Canvas")

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric(label="Roads", value=len(board.edges))
with col2:
    st.metric(label="Goals", value=len(board.goals))
with col3:
    st.metric(label="Reachable", value=len(report.routes))
with col4:
    if report.best is not None:
        st.metric(label="Best Cost", value=report.best.distance)
    else:
        st.metric(label="Best Cost", value="N/A")

st.divider()

col_viz, col_data = st.columns([2.2, 1])

with col_viz:
    st.subheader("Board")
    html_file = pyvis_board(board, report)
    with open(html_file, "r", encoding="utf-8") as f:
        components.html(f.read(), height=530, scrolling=False)

with col_data:
    st.subheader("Routes")
    if board.start is None:
        st.warning("Pick a start point first.")
    elif not board.goals:
        st.info("No goal points yet.")
    else:
        if report.best is not None:
            st.code(" → ".join(str(n) for n in report.best.path), language="text")
        st.dataframe(routes_frame(report), hide_index=True, use_container_width=True)
