# ball_constructor.py
"""
Ball construction: u is in ball(v) iff d(v, u) < d(v, closest landmark of v).
"""

from typing import Dict, Tuple

from compact_routing.routing.node_record import ComputerNode


def construct_ball(v: ComputerNode, paths_from_v: Dict[int, Tuple[int, ...]]):
    """
    Add every node strictly closer to v than v's closest landmark to ball(v),
    with a table entry for the first hop toward it. v itself is never in its ball.

    With no reachable landmark the distance is infinite, so the ball is the
    whole connected component of v minus v.
    """
    for u in sorted(paths_from_v):
        if u == v.index:
            continue
        shortest_path_to_u = paths_from_v[u]
        if shortest_path_to_u is None:
            continue
        if len(shortest_path_to_u) - 1 < v.distance_to_closest_landmark:
            v.set_port_toward(u, shortest_path_to_u[1])
            v.ball.add(u)
