from typing import List
from capacity import Capacity
from edge import Edge
from node import Node

def add_edge(nodes: List[Node], edges: List[Edge], u: int, v: int, cap: Capacity) -> int:
    """
    Append arc u -> v to the edge arena and register it on both endpoints.
    Returns the new edge's handle.
    """
    handle = len(edges)
    edges.append(Edge(u, v, cap))
    nodes[u].add_edge(handle)
    nodes[v].add_edge(handle)
    return handle
