from compact_routing.routing.address_builder import build_address, follow_port_path, resolve_address
from compact_routing.routing.ball_constructor import construct_ball
from compact_routing.routing.core_selector import core_degree_threshold, select_core
from compact_routing.routing.landmark_processor import process_landmarks
from compact_routing.routing.node_record import Address, ComputerNode, build_node_records
from compact_routing.routing.scheme_builder import (
    RoutingGraphBuilder,
    RoutingScheme,
    build_routing_scheme,
    route_node,
)
from compact_routing.routing.shortest_paths import BFSShortestPathOracle
