import os
from jinja2 import Environment, FileSystemLoader, select_autoescape
from api.dfs_api.services.visualizer_plugin import VisualizerPlugin
from api.dfs_api.services.recording_sink import RecordingEventSink
from api.dfs_api.model import Graph, NodeState

# Width and height of the space for graph
WIDTH = 800
HEIGHT = 600

STATE_COLORS = {
    NodeState.UNVISITED: "#4CAF50",
    NodeState.ACTIVE: "#9E9E9E",
    NodeState.DONE: "#212121",
}
HIGHLIGHT_COLOR = "#ff0000"


def get_node_levels(graph: Graph):
    """
    Performs BFS over child links to determine the depth level of each node.
    Returns a dictionary mapping level (int) to a list of node IDs.
    """
    levels = {}
    visited = set()

    # Roots are nodes nobody links to
    incoming = {target for _, target in graph.iter_edges()}
    roots = [n for n in graph.list_nodes() if n.node_id not in incoming]

    # Fully cyclic graph, start from the first created node
    if not roots and len(graph):
        roots = [graph.list_nodes()[0]]

    queue = [(root.node_id, 0) for root in roots]
    for r_id, _ in queue:
        visited.add(r_id)

    while queue:
        curr_id, dist = queue.pop(0)
        levels[curr_id] = dist
        for child_id in graph.get_node(curr_id).children_ids:
            if child_id in graph and child_id not in visited:
                visited.add(child_id)
                queue.append((child_id, dist + 1))

    # Whatever BFS did not reach goes to the first column
    for node in graph.list_nodes():
        if node.node_id not in levels:
            levels[node.node_id] = 0

    columns = {}
    for node_id, lvl in levels.items():
        columns.setdefault(lvl, []).append(node_id)
    return columns


class SvgTraversalVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "svg-traversal"

    @property
    def display_name(self) -> str:
        return "DFS Traversal View"

    def render(self, graph: Graph, view: RecordingEventSink = None, **options) -> str:
        n_nodes = len(graph)
        if n_nodes == 0:
            return "<html><body>Empty Graph</body></html>"

        view = view or RecordingEventSink()
        columns = get_node_levels(graph)

        # --- Calculate Coords ---
        positions = {}
        max_lvl = max(columns.keys()) if columns else 0
        dx = WIDTH / (max_lvl + 2)

        for lvl, node_ids in columns.items():
            x = (lvl + 1) * dx
            dy = HEIGHT / (len(node_ids) + 1)
            for i, node_id in enumerate(node_ids):
                positions[node_id] = {"x": x, "y": dy * (i + 1)}

        nodes = [
            {
                "id": node.node_id,
                "label": node.label,
                "x": positions[node.node_id]["x"],
                "y": positions[node.node_id]["y"],
                "fill": STATE_COLORS[view.state_of(node.node_id)],
                "state": view.state_of(node.node_id).value,
                "times": view.times_label(node.node_id),
            }
            for node in graph.list_nodes()
        ]

        edges = []
        for source, target in graph.iter_edges():
            highlighted = view.highlighted_edge == (source, target)
            edges.append({
                "source": positions[source],
                "target": positions[target],
                "stroke": HIGHLIGHT_COLOR if highlighted else "black",
                "width": 3 if highlighted else 1,
                "highlighted": highlighted,
            })

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path), autoescape=select_autoescape(["html"]))
        template = env.get_template('traversal.html')

        return template.render(
            title=options.get("title", "Depth-first search"),
            nodes=nodes,
            edges=edges,
            width=WIDTH,
            height=HEIGHT,
            radius=20,
        )
