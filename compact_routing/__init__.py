"""
Compact name-independent routing over random power-law graphs.

Landmarks are the nodes whose degree clears a threshold derived from the
graph's power-law exponent; every other node keeps table entries only for the
landmarks and for its ball, and is addressed by its closest landmark plus the
port path from that landmark.
"""

from compact_routing.config.routing_config import NO_LANDMARK_INDEX, RoutingSchemeConfiguration
from compact_routing.errors import InvalidConfigurationError
from compact_routing.routing import (
    Address,
    BFSShortestPathOracle,
    ComputerNode,
    RoutingGraphBuilder,
    RoutingScheme,
    build_routing_scheme,
    follow_port_path,
    resolve_address,
)
from compact_routing.topology import PowerLawGraph, RandomPowerLawGraphGenerator

__version__ = "0.1.0"
