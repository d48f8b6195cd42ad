import networkx as nx
import pytest

from compact_routing.routing.ball_constructor import construct_ball
from compact_routing.routing.landmark_processor import process_landmarks
from compact_routing.routing.node_record import build_node_records
from compact_routing.routing.scheme_builder import RoutingGraphBuilder
from compact_routing.routing.shortest_paths import BFSShortestPathOracle
from compact_routing.topology.power_law_topology import PowerLawGraph


def _processed(power_law_graph, index, core):
    v = build_node_records(power_law_graph)[index]
    paths = BFSShortestPathOracle(power_law_graph.graph).paths_from(index)
    process_landmarks(v, paths, core)
    construct_ball(v, paths)
    return v


def test_ball_is_strictly_inside_landmark_distance(spider_graph):
    v = _processed(spider_graph, 0, (2,))
    assert v.ball == {1}
    assert v.routing_table == {1: 0, 2: 0}


def test_node_at_distance_one_has_empty_ball(spider_graph):
    v = _processed(spider_graph, 5, (2,))
    assert v.ball == set()
    assert v.routing_table == {2: 0}


def test_landmark_ball_is_empty(spider_graph):
    v = _processed(spider_graph, 2, (2,))
    assert v.ball == set()
    assert v.routing_table == {}


def test_no_landmark_ball_is_whole_component():
    graph = nx.Graph()
    graph.add_edges_from([(0, 1), (1, 2), (3, 4)])
    power_law_graph = PowerLawGraph(graph, tau=2.5)
    v = _processed(power_law_graph, 0, ())

    assert v.ball == {1, 2}
    assert 0 not in v.ball
    assert v.routing_table == {1: 0, 2: 0}


class ExplicitUnreachableOracle(BFSShortestPathOracle):
    """Reports every node of the graph, with None for the unreachable ones"""

    def paths_from(self, source):
        paths = super().paths_from(source)
        return {node: paths.get(node) for node in self.graph}


def test_unreachable_entries_reported_as_none_are_skipped():
    graph = nx.Graph()
    graph.add_edges_from([(0, 1), (1, 2), (3, 4)])
    power_law_graph = PowerLawGraph(graph, tau=2.5)
    v = build_node_records(power_law_graph)[0]
    paths = ExplicitUnreachableOracle(graph).paths_from(0)
    assert paths[3] is None

    process_landmarks(v, paths, ())
    construct_ball(v, paths)

    assert v.ball == {1, 2}
    assert v.routing_table == {1: 0, 2: 0}


def test_scheme_builds_with_none_reporting_oracle():
    graph = nx.Graph()
    graph.add_edges_from([(0, 1), (1, 2), (3, 4)])
    power_law_graph = PowerLawGraph(graph, tau=1.6)
    with pytest.warns(UserWarning):
        scheme = RoutingGraphBuilder(power_law_graph, oracle=ExplicitUnreachableOracle(graph)).process()

    assert scheme.ball_of(0) == {1, 2}
    assert scheme.ball_of(3) == {4}
    assert scheme.address_of(3).closest_landmark_index == -1
