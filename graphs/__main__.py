"""
Run a graph algorithm on a JSON graph document and print the result.

    python -m graphs dijkstra graph.json --source 0 --target 3
    python -m graphs kruskal graph.json --maximum --debug

See loader.py for the document layout.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console, RenderableType

from .connectivity import (
    connected_components,
    connected_components_union_find,
    strongly_connected_components,
)
from .constants import LOG_FORMAT
from .display import (
    render_adjacency,
    render_all_pairs,
    render_coloring,
    render_components,
    render_cycle,
    render_negative_cycle,
    render_order,
    render_path,
    render_shortest_paths,
    render_spanning,
    show,
)
from .exceptions import GraphError
from .graph import Graph
from .loader import load_graph
from .results import NegativeCycle
from .shortest_paths import (
    bellman_ford,
    bfs_distances,
    bfs_shortest_path,
    dijkstra,
    floyd_warshall,
)
from .spanning import kruskal, prim
from .structure import (
    find_directed_cycle,
    find_undirected_cycle,
    topological_sort,
    topological_sort_kahn,
    two_coloring,
)
from .types import Vertex

logger = logging.getLogger(__name__)

ALGORITHMS = (
    "adjacency",
    "components",
    "components-union-find",
    "scc",
    "cycle",
    "undirected-cycle",
    "toposort",
    "toposort-kahn",
    "bipartite",
    "kruskal",
    "prim",
    "bfs",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
)


def _default_source(graph: Graph, source: Vertex | None) -> Vertex:
    if source is not None:
        return source
    if not len(graph):
        raise ValueError("The graph is empty: no source vertex")
    return graph.vertices()[0]


def run(
    algorithm: str,
    graph: Graph,
    source: Vertex | None = None,
    target: Vertex | None = None,
    maximum: bool = False,
) -> RenderableType:
    """Runs one algorithm and returns the rendering of its result."""
    match algorithm:
        case "adjacency":
            return render_adjacency(graph)
        case "components":
            return render_components(connected_components(graph))
        case "components-union-find":
            return render_components(connected_components_union_find(graph))
        case "scc":
            return render_components(strongly_connected_components(graph))
        case "cycle":
            return render_cycle(find_directed_cycle(graph))
        case "undirected-cycle":
            return render_cycle(find_undirected_cycle(graph))
        case "toposort":
            return render_order(topological_sort(graph))
        case "toposort-kahn":
            return render_order(topological_sort_kahn(graph))
        case "bipartite":
            return render_coloring(two_coloring(graph))
        case "kruskal":
            return render_spanning(kruskal(graph, maximum=maximum))
        case "prim":
            return render_spanning(prim(graph, maximum=maximum, root=source))
        case "bfs":
            start = _default_source(graph, source)
            if target is not None:
                return render_path(bfs_shortest_path(graph, start, target))
            return render_shortest_paths(bfs_distances(graph, start))
        case "dijkstra" | "bellman-ford":
            start = _default_source(graph, source)
            algorithm_fn = dijkstra if algorithm == "dijkstra" else bellman_ford
            result = algorithm_fn(graph, start)
            if target is None:
                return render_shortest_paths(result)
            graph.require_vertex(target)
            if isinstance(result, NegativeCycle):
                return render_negative_cycle(result)
            return render_path(result.path_to(target))
        case "floyd-warshall":
            all_pairs = floyd_warshall(graph)
            if source is None or target is None or isinstance(all_pairs, NegativeCycle):
                return render_all_pairs(all_pairs)
            return render_path(all_pairs.path(source, target))
        case _:
            raise ValueError(f"Unknown algorithm: {algorithm}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphs", description="Run a classical graph algorithm"
    )
    parser.add_argument("algorithm", choices=ALGORITHMS, help="Algorithm to run")
    parser.add_argument("file", help="JSON graph document")
    parser.add_argument("--source", type=int, help="Source vertex (first vertex by default)")
    parser.add_argument("--target", type=int, help="Target vertex for path queries")
    parser.add_argument(
        "--maximum", action="store_true", help="Maximum instead of minimum spanning tree"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        graph = load_graph(args.file)
        logger.info(f"Loaded {graph!r} from {args.file}")
        logger.info(f"Running {args.algorithm}")
        renderable = run(args.algorithm, graph, args.source, args.target, args.maximum)
    except (GraphError, ValueError, OSError) as error:
        logger.error(f"{error}")
        return 1

    show(renderable, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
