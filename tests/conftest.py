import networkx as nx
import pytest

from compact_routing.topology.power_law_topology import PowerLawGraph, RandomPowerLawGraphGenerator


@pytest.fixture
def spider_graph():
    """Path 0-1-2-3-4 with a pendant 5 on node 2; tau=1.9 puts only node 2 in the core."""
    graph = nx.Graph()
    graph.add_edges_from([(0, 1), (1, 2), (2, 3), (3, 4), (2, 5)])
    return PowerLawGraph(graph, tau=1.9)


@pytest.fixture
def path_graph():
    return PowerLawGraph(nx.path_graph(5), tau=2.5)


@pytest.fixture
def random_power_law_graph():
    return RandomPowerLawGraphGenerator(node_count=300, tau=2.5, average_degree=4.0, seed=7).generate()
