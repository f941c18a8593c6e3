"""
Rich renderings of graphs and algorithm results.

Renderers build rich renderables and never print; show() prints one.
"""

from collections.abc import Mapping, Sequence

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from .constants import INFINITY
from .graph import Graph
from .results import (
    AllPairsShortestPaths,
    NegativeCycle,
    Path,
    ShortestPaths,
    SpanningForest,
    SpanningTree,
    Unreachable,
)
from .types import Color, Vertex, Weight

ARROW = " -> "


def format_weight(weight: Weight) -> str:
    if weight == INFINITY:
        return "∞"
    if isinstance(weight, float):
        return str(int(weight)) if weight.is_integer() else f"{weight:g}"
    return str(weight)


def render_adjacency(graph: Graph) -> Table:
    """Adjacency list, one row per vertex in ascending order: destination(weight) entries."""
    table = Table(title="Adjacency list")
    table.add_column("vertex", justify="right")
    table.add_column("edges")
    for vertex in sorted(graph.vertices()):
        edges = " ".join(
            f"{edge.destination}({format_weight(edge.weight)})"
            for edge in graph.edges_from(vertex)
        )
        table.add_row(str(vertex), edges)
    return table


def render_path(result: Path | Unreachable) -> Text:
    match result:
        case Path(vertices=vertices, distance=distance):
            text = Text(ARROW.join(str(v) for v in vertices), style="bold")
            text.append(f"  (distance {format_weight(distance)})")
            return text
        case Unreachable(source=source, target=target):
            return Text(f"No path from {source} to {target}", style="yellow")


def render_negative_cycle(result: NegativeCycle) -> Text:
    if result.source is None:
        members = ", ".join(str(v) for v in result.witness)
        return Text(f"Negative cycle through {members}", style="bold red")
    return Text(
        f"Negative cycle reachable from {result.source}: "
        + ARROW.join(str(v) for v in result.witness),
        style="bold red",
    )


def render_shortest_paths(result: ShortestPaths | NegativeCycle) -> RenderableType:
    if isinstance(result, NegativeCycle):
        return render_negative_cycle(result)

    table = Table(title=f"Shortest paths from {result.source}")
    table.add_column("vertex", justify="right")
    table.add_column("distance", justify="right")
    table.add_column("path")
    for vertex in sorted(result.distances):
        path = result.path_to(vertex)
        route = ARROW.join(str(v) for v in path.vertices) if isinstance(path, Path) else "-"
        table.add_row(str(vertex), format_weight(result.distances[vertex]), route)
    return table


def render_all_pairs(result: AllPairsShortestPaths | NegativeCycle) -> RenderableType:
    if isinstance(result, NegativeCycle):
        return render_negative_cycle(result)

    table = Table(title="All pairs shortest distances")
    table.add_column("from \\ to", justify="right")
    for vertex in result.vertices:
        table.add_column(str(vertex), justify="right")
    for source in result.vertices:
        table.add_row(
            str(source),
            *(format_weight(result.distance(source, target)) for target in result.vertices),
        )
    return table


def render_components(labels: Mapping[Vertex, object]) -> Table:
    groups: dict[object, list[Vertex]] = {}
    for vertex, label in labels.items():
        groups.setdefault(label, []).append(vertex)

    table = Table(title=f"{len(groups)} component(s)")
    table.add_column("component", justify="right")
    table.add_column("vertices")
    for index, members in enumerate(sorted(sorted(group) for group in groups.values())):
        table.add_row(str(index), " ".join(str(v) for v in members))
    return table


def render_spanning(result: SpanningTree | SpanningForest) -> Table:
    if isinstance(result, SpanningForest):
        title = f"Spanning forest ({result.component_count} trees, graph is disconnected)"
    else:
        title = "Spanning tree"
    table = Table(title=title, caption=f"total weight {format_weight(result.total_weight)}")
    table.add_column("edge")
    table.add_column("weight", justify="right")
    for edge in result.edges:
        table.add_row(f"{edge.source} - {edge.destination}", format_weight(edge.weight))
    return table


def render_cycle(cycle: Sequence[Vertex] | None) -> Text:
    if cycle is None:
        return Text("No cycle", style="green")
    return Text("Cycle: " + ARROW.join(str(v) for v in cycle), style="bold red")


def render_order(order: Sequence[Vertex]) -> Text:
    """Topological order; an empty order is read as the graph having a cycle."""
    if not order:
        return Text("No topological order: the graph has a cycle", style="bold red")
    return Text(ARROW.join(str(v) for v in order))


def render_coloring(coloring: Mapping[Vertex, Color] | None) -> RenderableType:
    if coloring is None:
        return Text("Not bipartite", style="bold red")
    table = Table(title="Bipartite")
    table.add_column("color", justify="right")
    table.add_column("vertices")
    for color in sorted(set(coloring.values())):
        members = sorted(v for v, c in coloring.items() if c == color)
        table.add_row(str(color), " ".join(str(v) for v in members))
    return table


def show(renderable: RenderableType, console: Console | None = None) -> None:
    (console or Console()).print(renderable)


__all__ = [
    "format_weight",
    "render_adjacency",
    "render_path",
    "render_negative_cycle",
    "render_shortest_paths",
    "render_all_pairs",
    "render_components",
    "render_spanning",
    "render_cycle",
    "render_order",
    "render_coloring",
    "show",
]
