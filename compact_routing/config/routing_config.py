# routing_config.py
"""
Routing Scheme Configuration
Fixed algorithm constants and the validated parameter set for one scheme construction.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict

from compact_routing.errors import InvalidConfigurationError

# ===== ALGORITHM CONSTANTS =====
EPSILON = 1e-12               # Keeps gamma strictly above the (tau-2)/(2tau-3) boundary
CORE_DEGREE_DIVISOR = 4       # threshold = n^gamma' / CORE_DEGREE_DIVISOR
NO_LANDMARK_INDEX = -1        # Address sentinel when no landmark is reachable
SINGLE_VERTEX_PATH_LEN = 0    # Edge count of the path from a node to itself

# ===== DEFAULT PARAMETERS =====
SCHEME_PARAMETERS = {
    'epsilon': EPSILON,
    'core_degree_divisor': CORE_DEGREE_DIVISOR,
    'verbose': False,
    'max_workers': None,       # None or 1 = sequential construction
}

GENERATOR_PARAMETERS = {
    'node_count': 1000,
    'tau': 2.5,
    'average_degree': 4.0,
    'seed': 42,
}


@dataclass
class RoutingSchemeConfiguration:
    """Parameters for a single routing scheme construction"""
    tau: float
    node_count: int
    epsilon: float = EPSILON
    core_degree_divisor: float = CORE_DEGREE_DIVISOR
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration on creation"""
        if not isinstance(self.tau, numbers.Real) or not math.isfinite(self.tau):
            raise InvalidConfigurationError(f"tau must be a finite number, got {self.tau!r}")
        self.tau = float(self.tau)
        if self.tau <= 1:
            raise InvalidConfigurationError(
                f"tau must be greater than 1 (gamma' divides by tau - 1), got {self.tau}")
        if 2 * self.tau - 3 == 0:
            raise InvalidConfigurationError("tau = 1.5 makes 2*tau - 3 zero in the gamma formula")
        if not isinstance(self.node_count, numbers.Integral) or self.node_count <= 0:
            raise InvalidConfigurationError(
                f"node_count must be a positive integer, got {self.node_count!r}")
        self.node_count = int(self.node_count)
        if self.epsilon <= 0:
            raise InvalidConfigurationError(f"epsilon must be positive, got {self.epsilon}")
        if self.core_degree_divisor <= 0:
            raise InvalidConfigurationError(
                f"core_degree_divisor must be positive, got {self.core_degree_divisor}")

    @classmethod
    def from_graph(cls, graph, **overrides) -> 'RoutingSchemeConfiguration':
        """Build a configuration from a graph source exposing `tau` and `node_count`"""
        params = {key: value for key, value in SCHEME_PARAMETERS.items()
                  if key in ('epsilon', 'core_degree_divisor', 'verbose')}
        params.update(overrides)
        return cls(tau=graph.tau, node_count=graph.node_count, **params)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'tau': self.tau,
            'node_count': self.node_count,
            'epsilon': self.epsilon,
            'core_degree_divisor': self.core_degree_divisor,
            'verbose': self.verbose,
        }

    def print_configuration_summary(self):
        """Print current configuration summary"""
        print(f"\n{'='*60}")
        print("ROUTING SCHEME CONFIGURATION")
        print(f"{'='*60}")
        print(f"Nodes: {self.node_count}")
        print(f"Power-law exponent (tau): {self.tau}")
        print(f"Epsilon: {self.epsilon}")
        print(f"Core degree divisor: {self.core_degree_divisor}")
