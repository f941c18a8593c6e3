"""
Classical algorithms on weighted, possibly directed, possibly disconnected graphs.

**Substrate**
    - graph.py: Graph store (integer vertices, adjacency lists)
    - union_find.py: UnionFind with path compression and union by rank
    - traversal.py: DepthFirstSearch events, breadth-first levels

**Connectivity** (connectivity.py)
    - connected_components, connected_components_union_find
    - strongly_connected_components (Kosaraju)

**Structure** (structure.py)
    - directed / undirected cycle detection
    - topological_sort (DFS postorder), topological_sort_kahn
    - two_coloring, is_bipartite

**Optimization**
    - spanning.py: kruskal, prim
    - shortest_paths.py: bfs_distances, bfs_shortest_path, dijkstra,
      bellman_ford, floyd_warshall

Results are plain values (results.py); display.py renders them with rich.
"""

from .connectivity import (
    component_groups,
    connected_components,
    connected_components_union_find,
    is_connected,
    strongly_connected_components,
)
from .constants import DEFAULT_WEIGHT, INFINITY
from .exceptions import GraphError, NegativeWeightError, UnknownVertexError
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
from .shortest_paths import (
    bellman_ford,
    bfs_distances,
    bfs_shortest_path,
    dijkstra,
    floyd_warshall,
)
from .spanning import SpanningMethod, kruskal, prim, spanning_tree
from .structure import (
    find_directed_cycle,
    find_undirected_cycle,
    has_directed_cycle,
    has_undirected_cycle,
    has_undirected_cycle_union_find,
    is_bipartite,
    topological_sort,
    topological_sort_kahn,
    two_coloring,
)
from .traversal import (
    DepthFirstSearch,
    Discover,
    EdgeKind,
    Examine,
    Finish,
    breadth_first_levels,
    breadth_first_order,
    depth_first_postorder,
    depth_first_preorder,
)
from .types import Edge, Vertex, Weight
from .union_find import UnionFind

__all__ = [
    # Substrate
    "Graph",
    "Edge",
    "Vertex",
    "Weight",
    "UnionFind",
    "DEFAULT_WEIGHT",
    "INFINITY",
    "DepthFirstSearch",
    "Discover",
    "Examine",
    "Finish",
    "EdgeKind",
    "depth_first_preorder",
    "depth_first_postorder",
    "breadth_first_levels",
    "breadth_first_order",
    # Errors
    "GraphError",
    "UnknownVertexError",
    "NegativeWeightError",
    # Results
    "Path",
    "Unreachable",
    "NegativeCycle",
    "ShortestPaths",
    "AllPairsShortestPaths",
    "SpanningTree",
    "SpanningForest",
    # Connectivity
    "connected_components",
    "connected_components_union_find",
    "component_groups",
    "is_connected",
    "strongly_connected_components",
    # Structure
    "find_directed_cycle",
    "has_directed_cycle",
    "find_undirected_cycle",
    "has_undirected_cycle",
    "has_undirected_cycle_union_find",
    "topological_sort",
    "topological_sort_kahn",
    "two_coloring",
    "is_bipartite",
    # Optimization
    "SpanningMethod",
    "kruskal",
    "prim",
    "spanning_tree",
    "bfs_distances",
    "bfs_shortest_path",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
]
