# node_record.py
"""
Per-node routing state.

Records live in a single list indexed by node id; every reference to another
node (landmarks, ball members, path entries, table keys) is a plain int index.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from compact_routing.config.routing_config import NO_LANDMARK_INDEX


@dataclass(frozen=True)
class Address:
    """Compact routing label: closest landmark plus the port path from it back to the node"""
    own_index: int
    closest_landmark_index: int
    port_path_from_landmark: Tuple[int, ...] = ()

    @property
    def has_landmark(self) -> bool:
        return self.closest_landmark_index != NO_LANDMARK_INDEX

    def __len__(self):
        return len(self.port_path_from_landmark)


@dataclass
class ComputerNode:
    index: int
    degree: int
    ports: Tuple[int, ...] = ()                       # port -> neighbor index
    neighbor_port: Dict[int, int] = field(default_factory=dict)
    routing_table: Dict[int, int] = field(default_factory=dict)
    shortest_paths_to_landmarks: Dict[int, Tuple[int, ...]] = field(default_factory=dict)
    closest_landmark: Optional[int] = None
    distance_to_closest_landmark: float = math.inf
    ball: Set[int] = field(default_factory=set)
    address: Optional[Address] = None

    def __post_init__(self):
        if not self.neighbor_port:
            self.neighbor_port = {neighbor: port for port, neighbor in enumerate(self.ports)}

    @classmethod
    def from_ports(cls, index: int, ports: Tuple[int, ...]) -> 'ComputerNode':
        return cls(index=index, degree=len(ports), ports=tuple(ports))

    @property
    def is_landmark(self) -> bool:
        return self.closest_landmark == self.index

    @property
    def table_size(self) -> int:
        return len(self.routing_table)

    def port_of(self, neighbor: int) -> int:
        """Port index of the edge toward `neighbor`; KeyError if not adjacent"""
        return self.neighbor_port[neighbor]

    def neighbor_at(self, port: int) -> int:
        return self.ports[port]

    def set_port_toward(self, destination: int, first_hop: int):
        """Route `destination` through the port leading to `first_hop`"""
        self.routing_table[destination] = self.port_of(first_hop)

    def shortest_path_to_landmark(self, landmark: Optional[int]) -> Optional[Tuple[int, ...]]:
        if landmark is None:
            return None
        return self.shortest_paths_to_landmarks.get(landmark)


def build_node_records(power_law_graph) -> List[ComputerNode]:
    """Fresh, unrouted records for every node of a PowerLawGraph"""
    return [ComputerNode.from_ports(node, power_law_graph.ports(node))
            for node in power_law_graph.nodes()]
