from compact_routing.config.routing_config import (
    CORE_DEGREE_DIVISOR,
    EPSILON,
    GENERATOR_PARAMETERS,
    NO_LANDMARK_INDEX,
    SCHEME_PARAMETERS,
    SINGLE_VERTEX_PATH_LEN,
    RoutingSchemeConfiguration,
)
