# address_builder.py
"""
Address construction and replay.
"""

from typing import Sequence, Tuple

from compact_routing.config.routing_config import NO_LANDMARK_INDEX
from compact_routing.routing.node_record import Address, ComputerNode


def rev_port_path_from_closest_landmark(v: ComputerNode,
                                        records: Sequence[ComputerNode]) -> Tuple[int, ...]:
    """
    Ports used on a shortest path from v's closest landmark down to v.

    Entry i is the port at path[k - i] leading to path[k - i - 1], where
    path = (v, ..., landmark) has k edges. Empty if no landmark is reachable.
    """
    path = v.shortest_path_to_landmark(v.closest_landmark)
    if path is None:
        return ()

    length = len(path) - 1  # no port needed at v itself
    return tuple(records[path[length - i]].port_of(path[length - i - 1])
                 for i in range(length))


def build_address(v: ComputerNode, records: Sequence[ComputerNode]) -> Address:
    port_path = rev_port_path_from_closest_landmark(v, records)
    closest_landmark_index = v.closest_landmark if v.closest_landmark is not None else NO_LANDMARK_INDEX
    return Address(v.index, closest_landmark_index, port_path)


def follow_port_path(records: Sequence[ComputerNode], start: int,
                     port_path: Sequence[int]) -> int:
    """Walk `port_path` hop by hop from `start` and return the node reached"""
    current = start
    for port in port_path:
        current = records[current].neighbor_at(port)
    return current


def resolve_address(records: Sequence[ComputerNode], address: Address) -> int:
    """Node reached by replaying an address from its landmark, or -1 without a landmark"""
    if not address.has_landmark:
        return NO_LANDMARK_INDEX
    return follow_port_path(records, address.closest_landmark_index,
                            address.port_path_from_landmark)
