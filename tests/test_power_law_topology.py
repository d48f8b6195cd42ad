import networkx as nx
import pytest

from compact_routing.topology.power_law_topology import PowerLawGraph, RandomPowerLawGraphGenerator


def test_ports_follow_adjacency_order(spider_graph):
    assert spider_graph.ports(2) == (1, 3, 5)
    assert spider_graph.ports(0) == (1,)
    assert spider_graph.degree(2) == 3
    assert spider_graph.degrees() == [1, 2, 3, 2, 1, 1]
    assert spider_graph.node_count == 6
    assert spider_graph.edge_count == 5


def test_non_contiguous_nodes_are_rejected():
    graph = nx.Graph()
    graph.add_edge(1, 2)
    with pytest.raises(ValueError):
        PowerLawGraph(graph, tau=2.5)


def test_from_networkx_relabels_and_keeps_labels():
    graph = nx.Graph()
    graph.add_edges_from([("a", "b"), ("b", "c"), ("c", "c")])
    power_law_graph = PowerLawGraph.from_networkx(graph, tau=2.5)

    assert list(power_law_graph.nodes()) == [0, 1, 2]
    assert [power_law_graph.label(node) for node in power_law_graph.nodes()] == ["a", "b", "c"]
    # self-loop dropped
    assert power_law_graph.edge_count == 2
    assert power_law_graph.degree(2) == 1


def test_generator_is_reproducible():
    first = RandomPowerLawGraphGenerator(node_count=200, tau=2.5, seed=3).generate()
    second = RandomPowerLawGraphGenerator(node_count=200, tau=2.5, seed=3).generate()
    assert list(first.graph.edges()) == list(second.graph.edges())
    assert first.tau == 2.5
    assert first.node_count == 200


def test_expected_degrees_are_decreasing_with_requested_mean():
    weights = RandomPowerLawGraphGenerator(node_count=500, tau=2.2, average_degree=5.0).expected_degrees()
    assert weights.mean() == pytest.approx(5.0)
    assert all(weights[i] >= weights[i + 1] for i in range(len(weights) - 1))


@pytest.mark.parametrize("kwargs", [
    {"node_count": 0},
    {"tau": 2.0},
    {"average_degree": 0.0},
])
def test_generator_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        RandomPowerLawGraphGenerator(**kwargs)
