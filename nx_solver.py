from typing import Iterable, Set, Tuple
import networkx as nx

from flow_network import FlowNetwork

S, T = ("__source__",), ("__sink__",)   # tuple keys never collide with names


def construct_graph(network: FlowNetwork) -> nx.DiGraph:
    """
    Same reduction as the core network. Dependency arcs get no `capacity`
    attribute, which networkx treats as infinite.
    """
    G = nx.DiGraph()
    G.add_node(S)
    G.add_node(T)

    for name, profit, cost in network.technologies():
        G.add_node(name)
        if profit > 0:
            G.add_edge(S, name, capacity=profit)
        if cost > 0:
            G.add_edge(name, T, capacity=cost)

    for dependent, required in network.dependencies():
        G.add_edge(dependent, required)

    return G


def networkx_solver(network: FlowNetwork) -> Tuple[int, Set[str]]:
    """
    Returns (revenue, selection). networkx may break ties between optimal
    selections differently from the core, so only the revenue is comparable.
    """
    G = construct_graph(network)
    total_profit = sum(cap for _, _, cap in G.out_edges(S, data="capacity"))

    cut_value, (reachable, _) = nx.minimum_cut(G, S, T)
    return total_profit - int(cut_value), set(reachable) - {S}


def is_closed(selection: Iterable[str], dependencies: Iterable[Tuple[str, str]]) -> bool:
    """
    True iff every dependency of a selected technology is selected too.
    """
    selected = set(selection)
    return all(required in selected
               for dependent, required in dependencies
               if dependent in selected)
