from typing import Any, Dict, List
import pandas as pd
import pulp as pl
from pulp import LpProblem, LpMaximize, LpVariable, LpStatus, lpSum

from flow_network import FlowNetwork


class SelectionSolver:
    """
    Solves the technology selection directly as a 0/1 program.

        maximize    Σ (profit_t − cost_t) · x_t
        subject to  x_dependent ≤ x_required   for every dependency
                    x_t ∈ {0, 1}

    The constraint matrix is totally unimodular, so the optimum equals the
    minimum-cut optimum of the flow network.

    Attributes:
        network (FlowNetwork): source of technologies and dependencies
        problem (LpProblem): the linear programming problem
        select_vars (Dict[str, LpVariable]): one binary per technology
    """

    def __init__(self, network: FlowNetwork) -> None:
        self.network = network
        self.technologies = list(network.technologies())
        self.problem = LpProblem("Technology_Selection", LpMaximize)
        self.select_vars: Dict[str, LpVariable] = {}
        self._built = False
        self._solution = None

    def build_model(self) -> None:
        self._add_select_vars()
        self._add_objective()
        self._add_dependency_constraints()
        self._built = True

    def _add_select_vars(self) -> None:
        # index based names: pulp rewrites characters such as '-' in names
        for i, (name, _, _) in enumerate(self.technologies):
            self.select_vars[name] = LpVariable(f"x_{i}", cat=pl.LpBinary)

    def _add_objective(self) -> None:
        self.problem += lpSum(
            (profit - cost) * self.select_vars[name]
            for name, profit, cost in self.technologies
        )

    def _add_dependency_constraints(self) -> None:
        for dependent, required in self.network.dependencies():
            self.problem += self.select_vars[dependent] <= self.select_vars[required]

    def solve(self) -> Dict[str, Any]:
        """
        Returns:
            Dict containing:
                - status: Solution status
                - revenue: Optimal net revenue (None unless optimal)
                - selected: Selected technologies in creation order
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self._built:
            raise RuntimeError("Model must be built before solving")

        if not self.select_vars:
            self._solution = {'status': 'Optimal', 'revenue': 0, 'selected': []}
            return self._solution

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != pl.LpStatusOptimal:
            self._solution = {
                'status': LpStatus[status],
                'revenue': None,
                'selected': None,
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'revenue': int(round(pl.value(self.problem.objective) or 0)),
            'selected': [
                name for name, _, _ in self.technologies
                if (self.select_vars[name].value() or 0) > 0.5
            ],
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        selected = set(self._solution['selected'])
        results: List[List] = [
            [name, profit, cost, profit - cost, name in selected]
            for name, profit, cost in self.technologies
        ]
        return pd.DataFrame(results, columns=["technology", "profit", "cost", "net", "chosen"])


def lp_solver(network: FlowNetwork) -> int:
    solver = SelectionSolver(network)
    solver.build_model()
    result = solver.solve()
    if result['status'] != 'Optimal':
        raise RuntimeError(f"LP solver finished with status {result['status']}")
    return result['revenue']
