import os
from datetime import datetime
import pandas as pd

from flow_network import FlowNetwork, Result

VERSION_HEADER = "#version 1"


def format_result(result: Result) -> str:
    """
    Revenue followed by every chosen technology, each with a leading space.
    """
    return str(result.revenue) + "".join(" " + name for name in result.chosen) + "\n"


def result_frame(network: FlowNetwork) -> pd.DataFrame:
    """
    One row per technology of an optimised network, in creation order.
    """
    chosen = set(network.chosen())
    rows = [
        [name, profit, cost, profit - cost, name in chosen]
        for name, profit, cost in network.technologies()
    ]
    return pd.DataFrame(rows, columns=["technology", "profit", "cost", "net", "chosen"])


def save_result_csv(frame: pd.DataFrame, output_dir: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    csv_filename = f'selection_results_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
    path = os.path.join(output_dir, csv_filename)
    frame.to_csv(path, index=False)
    return path
