from typing import Iterable, Union


class Unbounded:
    """
    Capacity of an arc that can never saturate.
    There is exactly one instance, `UNBOUNDED`; it never takes part in
    integer arithmetic, so summing it into a cut total is an error rather
    than a silent overflow.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "Unbounded":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded()

Capacity = Union[int, Unbounded]


class UnboundedCapacityError(AssertionError):
    """An unbounded capacity reached a place that needs a finite number."""


def is_unbounded(capacity: Capacity) -> bool:
    return capacity is UNBOUNDED


def residual(capacity: Capacity, flow: int) -> Capacity:
    """
    Forward residual capacity of an arc carrying `flow`.
    """
    if capacity is UNBOUNDED:
        return UNBOUNDED
    return capacity - flow


def has_room(capacity: Capacity) -> bool:
    """True iff the residual `capacity` admits more flow."""
    return capacity is UNBOUNDED or capacity > 0


def bottleneck(a: Capacity, b: Capacity) -> Capacity:
    """
    Minimum of two capacities; `UNBOUNDED` is the identity.
    """
    if a is UNBOUNDED:
        return b
    if b is UNBOUNDED:
        return a
    return min(a, b)


def total(capacities: Iterable[Capacity]) -> int:
    """
    Sum finite capacities. Meeting an `UNBOUNDED` one means a cut crossed a
    dependency arc, which a network built through the build API cannot do.
    """
    result = 0
    for c in capacities:
        if c is UNBOUNDED:
            raise UnboundedCapacityError("cannot sum an unbounded capacity")
        result += c
    return result
