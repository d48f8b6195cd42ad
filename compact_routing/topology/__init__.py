from compact_routing.topology.power_law_topology import PowerLawGraph, RandomPowerLawGraphGenerator
