#!/usr/bin/env python3
"""
🏗️ COMPACT ROUTING SCHEME BUILDER

Preprocessing pipeline for the landmark/ball routing scheme over a random
power-law graph:

1. Select the core (landmarks) once, from the degree threshold
2. For every node, with a single shortest-path oracle call:
   - process the landmarks (paths, table ports, closest landmark)
   - construct the ball (nodes closer than the closest landmark)
   - build the address (closest landmark + reversed port path)

Per-node work only reads topology and the frozen core, and only writes the
node's own record, so it runs as a data-parallel map over node indices.
"""

from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple, Union

import networkx as nx

from compact_routing.config.routing_config import SCHEME_PARAMETERS, RoutingSchemeConfiguration
from compact_routing.routing.address_builder import build_address
from compact_routing.routing.ball_constructor import construct_ball
from compact_routing.routing.core_selector import core_degree_threshold, select_core
from compact_routing.routing.landmark_processor import process_landmarks
from compact_routing.routing.node_record import Address, ComputerNode, build_node_records
from compact_routing.routing.shortest_paths import BFSShortestPathOracle
from compact_routing.topology.power_law_topology import PowerLawGraph


def route_node(index: int, oracle, topology: Sequence[ComputerNode],
               core: Tuple[int, ...]) -> ComputerNode:
    """Run landmark processing, ball construction and addressing for one node"""
    v = ComputerNode.from_ports(index, topology[index].ports)
    shortest_paths_from_v = oracle.paths_from(index)
    process_landmarks(v, shortest_paths_from_v, core)
    construct_ball(v, shortest_paths_from_v)
    v.address = build_address(v, topology)
    return v


# ===== PROCESS POOL WORKERS =====
_WORKER_STATE: Dict[str, object] = {}


def _init_worker(oracle, topology, core):
    _WORKER_STATE['oracle'] = oracle
    _WORKER_STATE['topology'] = topology
    _WORKER_STATE['core'] = core


def _route_node_in_worker(index: int) -> ComputerNode:
    return route_node(index, _WORKER_STATE['oracle'], _WORKER_STATE['topology'],
                      _WORKER_STATE['core'])


class RoutingScheme:
    """Finished routing tables, balls and addresses for every node"""

    def __init__(self, records: List[ComputerNode], core: Tuple[int, ...],
                 threshold: float, config: RoutingSchemeConfiguration):
        self.records = records
        self.core = core
        self.threshold = threshold
        self.config = config
        self._core_set = frozenset(core)

    def __len__(self):
        return len(self.records)

    def record(self, index: int) -> ComputerNode:
        return self.records[index]

    def address_of(self, index: int) -> Address:
        return self.records[index].address

    def routing_table_of(self, index: int) -> Dict[int, int]:
        return self.records[index].routing_table

    def ball_of(self, index: int):
        return self.records[index].ball

    def is_landmark(self, index: int) -> bool:
        return index in self._core_set

    def average_table_size(self) -> float:
        if not self.records:
            return 0.0
        return sum(record.table_size for record in self.records) / len(self.records)

    def summary(self) -> Dict[str, float]:
        return {
            'nodes': len(self.records),
            'landmarks': len(self.core),
            'threshold': self.threshold,
            'average_table_size': self.average_table_size(),
            'max_table_size': max((r.table_size for r in self.records), default=0),
            'nodes_without_landmark': sum(1 for r in self.records
                                          if r.address is not None and not r.address.has_landmark),
        }


class RoutingGraphBuilder:
    """
    Builds the routing scheme for one PowerLawGraph.

    The oracle defaults to breadth-first search over the graph; any object
    with a compatible `paths_from` can be injected (it must be picklable to
    be used with max_workers > 1).
    """

    def __init__(self, power_law_graph: PowerLawGraph,
                 config: Optional[RoutingSchemeConfiguration] = None,
                 oracle=None):
        self.power_law_graph = power_law_graph
        self.config = config or RoutingSchemeConfiguration.from_graph(power_law_graph)
        if self.config.node_count != power_law_graph.node_count:
            raise ValueError(f"Configuration is for {self.config.node_count} nodes, "
                             f"graph has {power_law_graph.node_count}")
        self.oracle = oracle or BFSShortestPathOracle(power_law_graph.graph)
        self.core: Tuple[int, ...] = ()
        self.threshold = core_degree_threshold(self.config)

    def compute_core(self) -> Tuple[int, ...]:
        self.core = select_core(self.power_law_graph, self.config)
        return self.core

    def process(self, max_workers: Optional[int] = SCHEME_PARAMETERS['max_workers']) -> RoutingScheme:
        """
        Build every node's tables, ball and address.

        Records are only returned once every node is done; a failure part way
        through propagates and leaves no partially built scheme behind.
        """
        core = self.compute_core()
        topology = build_node_records(self.power_law_graph)
        nodes = list(self.power_law_graph.nodes())

        if self.config.verbose:
            self.config.print_configuration_summary()
            print(f"Routing {len(nodes)} nodes through {len(core)} landmarks "
                  f"({'sequential' if not max_workers or max_workers <= 1 else f'{max_workers} workers'})...")

        if max_workers is not None and max_workers > 1:
            chunksize = max(1, len(nodes) // (max_workers * 4))
            with ProcessPoolExecutor(max_workers=max_workers, initializer=_init_worker,
                                     initargs=(self.oracle, topology, core)) as ex:
                records = list(ex.map(_route_node_in_worker, nodes, chunksize=chunksize))
        else:
            records = [route_node(index, self.oracle, topology, core) for index in nodes]

        scheme = RoutingScheme(records, core, self.threshold, self.config)

        if self.config.verbose:
            summary = scheme.summary()
            print(f"✅ Routing scheme built: {summary['landmarks']} landmarks, "
                  f"average table size {summary['average_table_size']:.2f}")
            if summary['nodes_without_landmark']:
                print(f"⚠️  {summary['nodes_without_landmark']} nodes cannot reach any landmark")

        return scheme


def build_routing_scheme(graph: Union[PowerLawGraph, nx.Graph], tau: Optional[float] = None,
                         max_workers: Optional[int] = SCHEME_PARAMETERS['max_workers'],
                         oracle=None, **config_overrides) -> RoutingScheme:
    """Run the full construction over a graph source or a plain NetworkX graph"""
    if not isinstance(graph, PowerLawGraph):
        if tau is None:
            raise ValueError("tau is required when building from a NetworkX graph")
        graph = PowerLawGraph.from_networkx(graph, tau)
    elif tau is not None:
        graph = PowerLawGraph(graph.graph, tau)

    config = RoutingSchemeConfiguration.from_graph(graph, **config_overrides)
    return RoutingGraphBuilder(graph, config, oracle).process(max_workers=max_workers)
