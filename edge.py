from capacity import Capacity, is_unbounded, residual


class Edge:
    """
    One directed arc of the selection network.
    Endpoints are node handles (indices into the network's node list) and
    never change; only `flow` moves during optimisation.
    """

    __slots__ = (
        "origin",       # from node
        "destination",  # to node
        "capacity",     # int, or UNBOUNDED for dependency arcs
        "flow",         # current flow
    )

    def __init__(self, origin: int, destination: int, capacity: Capacity) -> None:
        self.origin = origin
        self.destination = destination
        self.capacity = capacity
        self.flow = 0

    # ------------------------------------------------------------------ helpers

    def is_unbounded(self) -> bool:
        return is_unbounded(self.capacity)

    def remaining_capacity(self) -> Capacity:
        return residual(self.capacity, self.flow)

    def augment(self, amount: int) -> None:
        """
        Change the flow by `amount`; negative values push flow back.
        """
        self.flow += amount

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:  # nice for debugging
        return (
            f"Edge({self.origin}→{self.destination}, "
            f"cap={self.capacity!r}, flow={self.flow})"
        )
