#!/usr/bin/env python3
"""
RANDOM POWER-LAW GRAPH SOURCE

Graph source for the routing scheme: an undirected, unweighted, simple graph whose
nodes are the contiguous indices 0..n-1, together with the power-law exponent tau
it was generated with.

Key Features:
- Adapter over any NetworkX graph (relabelled to 0..n-1, original label kept)
- Stable node-local port numbering taken from adjacency order
- Chung-Lu style random power-law graph generation with reproducible seeds
"""

from typing import List, Optional, Tuple

import networkx as nx
import numpy as np

from compact_routing.config.routing_config import GENERATOR_PARAMETERS


class PowerLawGraph:
    """
    Read-only view of a power-law graph used by the routing scheme.
    Port p of node i is the p-th neighbor in i's adjacency order.
    """

    def __init__(self, graph: nx.Graph, tau: float):
        expected = set(range(graph.number_of_nodes()))
        if set(graph.nodes()) != expected:
            raise ValueError("Graph nodes must be the contiguous integers 0..n-1; "
                             "use PowerLawGraph.from_networkx to relabel")
        if graph.is_directed() or graph.is_multigraph():
            raise ValueError("Graph must be a simple undirected nx.Graph")

        self.graph = graph
        self.tau = tau
        self._ports: List[Tuple[int, ...]] = [
            tuple(graph.adj[node]) for node in range(graph.number_of_nodes())
        ]

    @classmethod
    def from_networkx(cls, graph: nx.Graph, tau: float) -> 'PowerLawGraph':
        """Relabel an arbitrary NetworkX graph to 0..n-1 and drop self-loops"""
        simple_graph = nx.Graph(graph)
        simple_graph.remove_edges_from(list(nx.selfloop_edges(simple_graph)))
        relabelled = nx.convert_node_labels_to_integers(
            simple_graph, ordering="default", label_attribute="label")
        return cls(relabelled, tau)

    @property
    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def nodes(self) -> range:
        return range(self.node_count)

    def degree(self, node: int) -> int:
        return len(self._ports[node])

    def degrees(self) -> List[int]:
        return [len(ports) for ports in self._ports]

    def ports(self, node: int) -> Tuple[int, ...]:
        return self._ports[node]

    def label(self, node: int):
        """Original label of a node relabelled by from_networkx"""
        return self.graph.nodes[node].get('label', node)

    def __repr__(self):
        return (f"PowerLawGraph(nodes={self.node_count}, edges={self.edge_count}, "
                f"tau={self.tau})")


class RandomPowerLawGraphGenerator:
    """
    Chung-Lu random power-law graph: node i gets expected degree
    w_i proportional to i ** (-1 / (tau - 1)) for ranks i = 1..n, rescaled so the mean
    expected degree equals `average_degree`.
    """

    def __init__(self,
                 node_count: int = GENERATOR_PARAMETERS['node_count'],
                 tau: float = GENERATOR_PARAMETERS['tau'],
                 average_degree: float = GENERATOR_PARAMETERS['average_degree'],
                 seed: Optional[int] = GENERATOR_PARAMETERS['seed']):
        if node_count < 1:
            raise ValueError("Node count must be >= 1")
        if tau <= 2:
            raise ValueError("Power-law generator requires tau > 2 for a finite mean degree")
        if average_degree <= 0:
            raise ValueError("Average degree must be positive")

        self.node_count = node_count
        self.tau = tau
        self.average_degree = average_degree
        self.seed = seed

    def expected_degrees(self) -> np.ndarray:
        """Expected degree sequence, heaviest node first"""
        exponent = 1.0 / (self.tau - 1)
        ranks = np.arange(1, self.node_count + 1, dtype=float)
        weights = ranks ** (-exponent)
        weights *= self.average_degree / weights.mean()
        return weights

    def generate(self) -> PowerLawGraph:
        weights = self.expected_degrees()
        graph = nx.expected_degree_graph(weights.tolist(), seed=self.seed, selfloops=False)
        return PowerLawGraph(nx.Graph(graph), self.tau)
