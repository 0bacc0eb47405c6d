import logging
import os

from graphviz import ExecutableNotFound, Graph

from symbdiff.expr import AtomicExpr, BinaryExpr

logger = logging.getLogger(__name__)


def make_graph():
    G = Graph()
    fontname = "Roboto Mono"
    G.attr("graph", fontname=fontname)
    G.attr("node", fontname=fontname)
    G.attr("node", style="rounded")
    G.attr("node", shape="box")
    G.attr("edge", fontname=fontname)
    return G


class IDManager:
    def __init__(self):
        self._id_counter = 1
        self.id_to_node = {}

    def new_id(self, node):
        new_id = f"w{self._id_counter}"
        self.id_to_node[new_id] = node
        self._id_counter += 1
        return new_id


def node_repr(node_id, expr, var):
    if isinstance(expr, AtomicExpr):
        return (f"<<font color=\"blue\">{node_id}</font><br/>"
                f"Atomic: {expr.to_string(var)}<br/>"
                f"[{expr.constant}, {expr.power}]>")
    if isinstance(expr, BinaryExpr):
        return (f"<<font color=\"blue\">{node_id}</font><br/>"
                f"Binary: {expr.op}>")
    return (f"<<font color=\"red\">{node_id}</font><br/>"
            f"Botched>")


def graph_expr(G, expr, var, idm=None):
    """Add expr and its children to G, returning the id of its root node."""
    if idm is None:
        idm = IDManager()

    node_id = idm.new_id(expr)
    G.node(node_id, node_repr(node_id, expr, var))
    if isinstance(expr, BinaryExpr):
        G.edge(node_id, graph_expr(G, expr.lhs, var, idm))
        G.edge(node_id, graph_expr(G, expr.rhs, var, idm))
    return node_id


def graph_terms(G, terms, var, idm=None):
    """Add a derivative term list to G below a single 'sum' node."""
    if idm is None:
        idm = IDManager()

    sum_id = idm.new_id(terms)
    G.node(sum_id, f"<<font color=\"blue\">{sum_id}</font><br/>sum>")
    for term in terms:
        G.edge(sum_id, graph_expr(G, term, var, idm))
    return sum_id


def render_line(directory, name, ast, terms, var):
    """Render the AST and its derivative side by side as <directory>/<name>.svg.

    Returns False when graphviz cannot render (no `dot` on PATH, or an
    unwritable directory).
    """
    G = make_graph()
    idm = IDManager()
    with G.subgraph(name="cluster_ast") as sub:
        sub.attr(label="expression")
        graph_expr(sub, ast, var, idm)
    with G.subgraph(name="cluster_derivative") as sub:
        sub.attr(label="derivative")
        graph_terms(sub, terms, var, idm)

    try:
        path = G.render(os.path.join(directory, name), format="svg", cleanup=True)
    except (ExecutableNotFound, OSError) as exc:
        logger.error("could not render graph %s: %s", name, exc)
        return False
    logger.info("rendered %d graph nodes to %s", len(idm.id_to_node), path)
    return True
