from .graph import Node, BayesianNetwork
from .topo import topological_sort, find_cycle

__all__ = [
    "Node",
    "BayesianNetwork",
    "topological_sort",
    "find_cycle"
]
