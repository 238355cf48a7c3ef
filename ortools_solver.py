from typing import List, Tuple
import numpy as np
from ortools.graph.python import max_flow

from flow_network import SINK, SOURCE, FlowNetwork

def ortools_solver(network: FlowNetwork) -> Tuple[int, List[str]]:
    """
    Max flow with OR-Tools on the same arcs as the core network.
    Returns (revenue, selection from the source side of the min cut).
    """
    total_profit = network.total_profit()
    if total_profit == 0:
        # nothing can earn money, the empty selection is optimal
        return 0, []

    # a dependency arc worth more than every profit together never gets cut
    stand_in = total_profit + 1

    # Define three parallel arrays: from-node, to-node, capacities.
    start_nodes = np.array([e.origin for e in network.edges])
    end_nodes = np.array([e.destination for e in network.edges])
    capacities = np.array(
        [stand_in if e.is_unbounded() else e.capacity for e in network.edges]
    )

    smf = max_flow.SimpleMaxFlow()
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(SOURCE, SINK)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"OR-Tools max flow finished with status {status}")

    source_side = set(smf.get_source_side_min_cut())
    selection = [
        node.name for v, node in enumerate(network.nodes)
        if v in source_side and v != SOURCE
    ]
    return total_profit - smf.optimal_flow(), selection
