from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from add_edge import add_edge
from augment_path import augment_path
from capacity import UNBOUNDED, total
from edge import Edge
from errors import (
    DuplicateTechnology,
    InvalidTechnologyName,
    NetworkNotOptimised,
    NetworkSealed,
    UnknownTechnologyReference,
)
from get_augmenting_path import SearchState, get_augmenting_path
from node import Node

SOURCE = 0
SINK = 1
RESERVED_NAMES = ("source", "sink")


class AddTechnology(NamedTuple):
    name: str
    profit: int
    cost: int


class AddDependency(NamedTuple):
    dependent: str   # technology that needs ...
    required: str    # ... this one


Command = Union[AddTechnology, AddDependency]


class Result(NamedTuple):
    revenue: int
    chosen: Tuple[str, ...]


class FlowNetwork:
    """
    Project-selection network solved by minimum cut.

    Every technology is a node. A positive profit becomes an arc
    source -> technology, a positive cost an arc technology -> sink, and a
    dependency an unbounded arc dependent -> required. After `optimise()` the
    nodes still reachable from the source in the residual network are the
    chosen technologies, and total profit minus the cut capacity is the best
    net revenue over all dependency-closed selections.

    Attributes:
        nodes (List[Node]): node arena, handle == index; 0 is source, 1 is sink
        edges (List[Edge]): edge arena, handle == index, append-only
        names (Dict[str, int]): technology name -> node handle
    """

    def __init__(self) -> None:
        # source and sink are not in `names` to avoid input clashes
        self.nodes: List[Node] = [Node("source"), Node("sink")]
        self.edges: List[Edge] = []
        self.names: Dict[str, int] = {}
        self._state: Optional[SearchState] = None

    def __len__(self) -> int:
        return len(self.names)

    # ------------------------------------------------------------------ build

    def _check_open(self) -> None:
        if self._state is not None:
            raise NetworkSealed()

    def add_technology(self, name: str, profit: int, cost: int) -> None:
        """
        Register a technology. Profits and costs that are not positive
        produce no arc.
        """
        self._check_open()
        if not name or name in RESERVED_NAMES:
            raise InvalidTechnologyName(name)
        if name in self.names:
            raise DuplicateTechnology(name)

        n = len(self.nodes)
        self.nodes.append(Node(name))
        self.names[name] = n

        if profit > 0:
            add_edge(self.nodes, self.edges, SOURCE, n, profit)
        if cost > 0:
            add_edge(self.nodes, self.edges, n, SINK, cost)

    def add_dependency(self, dependent: str, required: str) -> None:
        """
        `dependent` can only be selected together with `required`.
        Both must already be registered.
        """
        self._check_open()
        missing = [n for n in (dependent, required) if n not in self.names]
        if missing:
            raise UnknownTechnologyReference(missing)

        add_edge(
            self.nodes, self.edges,
            self.names[dependent], self.names[required], UNBOUNDED,
        )

    def apply(self, commands: Iterable[Command]) -> "FlowNetwork":
        for cmd in commands:
            if isinstance(cmd, AddTechnology):
                self.add_technology(cmd.name, cmd.profit, cmd.cost)
            elif isinstance(cmd, AddDependency):
                self.add_dependency(cmd.dependent, cmd.required)
            else:
                raise TypeError(f"unknown build command: {cmd!r}")
        return self

    # ------------------------------------------------------------------ read

    def technologies(self) -> Iterator[Tuple[str, int, int]]:
        """
        (name, profit, cost) per technology, in creation order.
        """
        for node in self.nodes[2:]:
            profit = cost = 0
            for handle in node.edges:
                e = self.edges[handle]
                if e.origin == SOURCE:
                    profit = e.capacity
                elif e.destination == SINK:
                    cost = e.capacity
            yield node.name, profit, cost

    def dependencies(self) -> Iterator[Tuple[str, str]]:
        for e in self.edges:
            if e.is_unbounded():
                yield self.nodes[e.origin].name, self.nodes[e.destination].name

    # ------------------------------------------------------------------ solve

    def optimise(self) -> Result:
        """
        Edmonds-Karp: augment along shortest residual paths until the
        source is cut off from the sink.
        """
        augmentation, state = get_augmenting_path(self.nodes, self.edges, SOURCE, SINK)
        while augmentation != 0:
            augment_path(self.edges, state, SOURCE, SINK, augmentation)
            augmentation, state = get_augmenting_path(self.nodes, self.edges, SOURCE, SINK)

        # only nodes still connected to the source were visited by the
        # failed search; they form the minimal cut by definition
        self._state = state
        return self.result()

    @property
    def optimised(self) -> bool:
        return self._state is not None

    def _final_state(self) -> SearchState:
        if self._state is None:
            raise NetworkNotOptimised()
        return self._state

    # ------------------------------------------------------------------ results

    def cut_capacity(self) -> int:
        visited = self._final_state().visited
        return total(
            e.capacity for e in self.edges
            if visited[e.origin] and not visited[e.destination]
        )

    def total_profit(self) -> int:
        return total(self.edges[h].capacity for h in self.nodes[SOURCE].edges)

    def net_revenue(self) -> int:
        return self.total_profit() - self.cut_capacity()

    def chosen(self) -> Tuple[str, ...]:
        visited = self._final_state().visited
        return tuple(
            node.name for v, node in enumerate(self.nodes)
            if visited[v] and v != SOURCE
        )

    def max_flow(self) -> int:
        self._final_state()
        return sum(self.edges[h].flow for h in self.nodes[SOURCE].edges)

    def sink_inflow(self) -> int:
        self._final_state()
        return sum(self.edges[h].flow for h in self.nodes[SINK].edges)

    def result(self) -> Result:
        return Result(self.net_revenue(), self.chosen())


def build_network(commands: Iterable[Command]) -> FlowNetwork:
    return FlowNetwork().apply(commands)
