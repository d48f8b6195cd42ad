# landmark_processor.py
"""
Landmark processing for a single source node.
"""

import math
from typing import Dict, Sequence, Tuple

from compact_routing.config.routing_config import SINGLE_VERTEX_PATH_LEN
from compact_routing.routing.node_record import ComputerNode


def process_landmarks(v: ComputerNode,
                      shortest_paths_from_v: Dict[int, Tuple[int, ...]],
                      core: Sequence[int]):
    """
    For every landmark reachable from v: keep the shortest path to it, and
    record in v's table the port toward the path's second node.

    The closest landmark and its distance are saved in v. When v is a landmark:
    - the closest landmark of v is v itself, at distance zero
    - the path from v to itself is just (v,)
    - v's table gets no entry for itself

    `core` must be in ascending index order; only a strictly shorter path
    replaces the current best, so equidistant landmarks resolve to the
    lowest index.
    """
    min_dist_from_node_to_core = math.inf
    closest_landmark_to_node = None

    for landmark in core:
        path = shortest_paths_from_v.get(landmark)
        if path is None:
            continue

        dist_from_curr_landmark = len(path) - 1  # edges, not vertices
        if dist_from_curr_landmark > SINGLE_VERTEX_PATH_LEN:
            v.set_port_toward(landmark, path[1])

        v.shortest_paths_to_landmarks[landmark] = path

        if dist_from_curr_landmark < min_dist_from_node_to_core:
            min_dist_from_node_to_core = dist_from_curr_landmark
            closest_landmark_to_node = landmark

    v.closest_landmark = closest_landmark_to_node
    v.distance_to_closest_landmark = min_dist_from_node_to_core
