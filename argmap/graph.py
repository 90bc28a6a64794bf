import os
import logging

from typing import Any, Optional

from . import args as am, const

_logger = logging.getLogger(__name__)


def build(args: am.List, argv: am.Map, name: str = const.ARGV0) -> Any:
    """
    Builds a graph of a parse result: positional arguments are chained in
    order and every option points to its values. Options seen without a
    value are dimmed.
    """
    from graphviz import Digraph  # type: ignore

    g = Digraph(name, filename=const.GRAPH_FILE)

    g.attr("graph", rankdir="LR")
    g.attr("node", shape="box")

    prev: Optional[str] = None
    for i, arg in enumerate(args):
        node = f"arg{i}"
        g.node(node, arg, shape="plaintext")
        if prev is not None:
            g.edge(prev, node, style="dashed")
        prev = node

    for i, (key, values) in enumerate(argv.items()):
        node = f"key{i}"
        if len(values) == 0:
            g.node(
                node,
                key,
                style="filled",
                fontcolor="#999999",
                fillcolor="#eeeeee",
            )
            continue

        g.node(node, key, style="filled", fillcolor="lightblue")
        for j, value in enumerate(values):
            g.node(f"{node}v{j}", value, shape="plaintext")
            g.edge(node, f"{node}v{j}")

    return g


def view(args: am.List, argv: am.Map, directory: str = "."):
    import graphviz  # type: ignore

    g = build(args, argv)
    path = os.path.join(directory, const.GRAPH_FILE)
    _logger.info(f"Rendering {path}")
    try:
        g.view(filename=path)
    except graphviz.ExecutableNotFound as e:
        raise RuntimeError(f"Could not render {path}: {e}")
