from typing import List
from edge import Edge
from get_augmenting_path import SearchState

def augment_path(edges: List[Edge], state: SearchState, s: int, t: int, amount: int) -> None:
    """
    Retrace the path recorded in `state` from t back to s and move `amount`
    units of flow along it.
    """
    v = t
    while v != s:
        e = edges[state.predecessor[v]]
        if e.destination == v:
            # arc used forward
            e.augment(amount)
            v = e.origin
        else:
            # arc used to push flow back
            e.augment(-amount)
            v = e.destination
