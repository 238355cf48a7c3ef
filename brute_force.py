"""
Exhaustive reference solver for small selections.
Evaluates every subset of technologies and keeps the best closed one.
"""

from itertools import combinations
from typing import List, Tuple

from flow_network import FlowNetwork

MAX_TECHNOLOGIES = 20


def brute_force_solver(network: FlowNetwork) -> Tuple[int, List[str]]:
    """
    Returns (revenue, selection). Among equally good selections the smallest
    one is returned, which is also the one the minimum cut reports.
    """
    techs = list(network.technologies())
    n = len(techs)
    if n > MAX_TECHNOLOGIES:
        raise ValueError(f"brute force is limited to {MAX_TECHNOLOGIES} technologies, got {n}")

    index = {name: i for i, (name, _, _) in enumerate(techs)}
    net = [profit - cost for _, profit, cost in techs]
    # requires[i] = bitmask of direct prerequisites of technology i
    requires = [0] * n
    for dependent, required in network.dependencies():
        requires[index[dependent]] |= 1 << index[required]

    best, best_set = 0, ()
    for size in range(1, n + 1):
        for subset in combinations(range(n), size):
            mask = 0
            for i in subset:
                mask |= 1 << i
            if any(requires[i] & ~mask for i in subset):
                continue
            value = sum(net[i] for i in subset)
            if value > best:
                best, best_set = value, subset

    return best, [techs[i][0] for i in best_set]
