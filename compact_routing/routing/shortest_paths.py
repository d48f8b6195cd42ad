# shortest_paths.py
"""
Shortest-path oracle used by the scheme builder.

Any object with a `paths_from(source)` method returning
{destination: (source, ..., destination)} for every reachable destination
can stand in for BFSShortestPathOracle.
"""

from typing import Dict, Tuple

import networkx as nx


class BFSShortestPathOracle:
    """Breadth-first single-source shortest paths over an unweighted graph"""

    def __init__(self, graph: nx.Graph):
        self.graph = graph

    def paths_from(self, source: int) -> Dict[int, Tuple[int, ...]]:
        paths = nx.single_source_shortest_path(self.graph, source)
        return {target: tuple(path) for target, path in paths.items()}
