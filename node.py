from typing import List


class Node:
    """
    A vertex of the selection network: a technology, or the source / sink.
    `edges` holds handles of every incident edge, both directions, in the
    order they were added.
    """

    __slots__ = ("name", "edges")

    def __init__(self, name: str) -> None:
        self.name = name
        self.edges: List[int] = []

    def add_edge(self, handle: int) -> None:
        self.edges.append(handle)

    def __repr__(self) -> str:
        return f"Node({self.name!r}, edges={self.edges})"
