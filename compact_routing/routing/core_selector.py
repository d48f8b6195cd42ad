# core_selector.py
"""
Core (landmark set) selection.

A node joins the core iff its degree is strictly above
n^gamma' / divisor, where gamma = (tau - 2) / (2 tau - 3) + epsilon and
gamma' = (1 - gamma) / (tau - 1).
"""

import warnings
from typing import Tuple

from compact_routing.config.routing_config import RoutingSchemeConfiguration
from compact_routing.errors import InvalidConfigurationError


def compute_gamma(tau: float, epsilon: float) -> float:
    return ((tau - 2) / ((2 * tau) - 3)) + epsilon


def compute_gamma_prime(tau: float, gamma: float) -> float:
    return (1 - gamma) / (tau - 1)


def core_degree_threshold(config: RoutingSchemeConfiguration) -> float:
    """Raises InvalidConfigurationError when n^gamma' is not representable (tau near 1.5)"""
    gamma = compute_gamma(config.tau, config.epsilon)
    gamma_prime = compute_gamma_prime(config.tau, gamma)
    try:
        return (config.node_count ** gamma_prime) / config.core_degree_divisor
    except OverflowError as e:
        raise InvalidConfigurationError(
            f"tau={config.tau} gives gamma'={gamma_prime:.3g}; n^gamma' overflows for n={config.node_count}") from e


def select_core(power_law_graph, config: RoutingSchemeConfiguration) -> Tuple[int, ...]:
    """
    Landmark indices in ascending order.

    An empty core is a valid outcome: every node then routes without a
    landmark and its ball covers its whole connected component.
    """
    threshold = core_degree_threshold(config)
    core = tuple(node for node in power_law_graph.nodes()
                 if power_law_graph.degree(node) > threshold)

    if not core:
        warnings.warn(f"No node degree exceeds the core threshold {threshold:.3f}; "
                      f"every node will route without a landmark", UserWarning, stacklevel=2)
    elif config.verbose:
        print(f"Core selected: {len(core)} landmarks (degree > {threshold:.3f})")

    return core
