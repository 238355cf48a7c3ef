from typing import List, Optional, Tuple
from collections import deque

from capacity import (
    Capacity,
    UNBOUNDED,
    UnboundedCapacityError,
    bottleneck,
    has_room,
)
from edge import Edge
from node import Node


class SearchState:
    """
    Traversal workspace of one breadth-first search, indexed by node handle.
    A fresh table is made for every search; the table of the last (failed)
    search is the source side of the minimum cut.
    """

    __slots__ = ("visited", "bottleneck", "predecessor")

    def __init__(self, n: int) -> None:
        self.visited: List[bool] = [False] * n
        self.bottleneck: List[Capacity] = [UNBOUNDED] * n
        self.predecessor: List[Optional[int]] = [None] * n

    def label(self, v: int, via: int, amount: Capacity) -> None:
        self.visited[v] = True
        self.predecessor[v] = via
        self.bottleneck[v] = amount

    def reachable(self) -> List[int]:
        return [v for v, seen in enumerate(self.visited) if seen]


def get_augmenting_path(
    nodes: List[Node],
    edges: List[Edge],
    s: int,
    t: int,
) -> Tuple[int, SearchState]:
    """
    Breadth-first search for a shortest s-t path with positive residual
    capacity on every arc, using forward arcs with room left and pushing
    back along arcs that carry flow.
    Returns (bottleneck, state); bottleneck == 0 iff no path exists.
    """
    state = SearchState(len(nodes))

    # start node
    state.visited[s] = True
    queue = deque([s])

    while queue:
        u = queue.popleft()

        for handle in nodes[u].edges:
            e = edges[handle]

            if e.origin == u:
                # forward: room left on u -> v
                v = e.destination
                room = e.remaining_capacity()
                if state.visited[v] or not has_room(room):
                    continue
            else:
                # backward: push flow back from u to v
                v = e.origin
                room = e.flow
                if state.visited[v] or room <= 0:
                    continue

            state.label(v, handle, bottleneck(state.bottleneck[u], room))

            if v == t:
                found = state.bottleneck[t]
                if found is UNBOUNDED:
                    raise UnboundedCapacityError(
                        "augmenting path made of unbounded arcs only"
                    )
                return found, state

            queue.append(v)

    # Sink t not reachable
    return 0, state
