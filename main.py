import argparse
import sys
import time
from datetime import datetime

from brute_force import brute_force_solver
from errors import ConfigError, NetworkBuildError
from flow_network import FlowNetwork
from load_data import Technologies, load_tables, read_config
from lp_solver import lp_solver
from nx_solver import is_closed, networkx_solver
from ortools_solver import ortools_solver
from present import VERSION_HEADER, format_result, result_frame, save_result_csv

DEFAULT_CONFIG = "test.txt"
OUTPUT_DIR = "results/"

CHECKERS = {
    "networkx": lambda network: networkx_solver(network)[0],
    "lp": lp_solver,
    "ortools": lambda network: ortools_solver(network)[0],
    "brute-force": lambda network: brute_force_solver(network)[0],
}


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Select the technologies with the best net revenue via a minimum cut."
    )
    ap.add_argument("config", nargs="?", default=DEFAULT_CONFIG,
                    help="configuration file (text format, or technologies CSV with --csv)")
    ap.add_argument("--csv", action="store_true",
                    help="read the technologies from a CSV table (name,cost,profit)")
    ap.add_argument("--dependencies", default=None,
                    help="dependencies CSV table (from,to); only valid with --csv")
    ap.add_argument("--save", action="store_true",
                    help="also write a per-technology result table to --output-dir")
    ap.add_argument("--output-dir", default=OUTPUT_DIR)
    ap.add_argument("--check", choices=sorted(CHECKERS), action="append", default=[],
                    help="cross-check the revenue with an independent solver")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print progress to stderr")
    args = ap.parse_args(argv)
    if args.dependencies is not None and not args.csv:
        ap.error("--dependencies only applies together with --csv")
    return args


def log(args: argparse.Namespace, msg: str) -> None:
    if args.verbose:
        print(msg, file=sys.stderr)


def initialise(network: FlowNetwork, args: argparse.Namespace) -> None:
    """
    Fill `network` from the configuration named in `args`. Any problem is
    reported on stderr and ends the program with exit code 1.
    """
    src = args.config
    try:
        if args.csv:
            dups = Technologies(src).find_duplicates()
            if not dups.empty:
                print(f"Warning: duplicate technologies in '{src}':\n{dups}", file=sys.stderr)
            commands = load_tables(src, args.dependencies)
        else:
            commands = read_config(src)
        network.apply(commands)
    except ConfigError as e:
        print(f"Configuration file '{src}' {e.reason}:", file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)
    except NetworkBuildError as e:
        print(f"Configuration file '{src}' is inconsistent:", file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)


def cross_check(network: FlowNetwork, names, args: argparse.Namespace) -> bool:
    revenue = network.net_revenue()
    ok = True
    if not is_closed(network.chosen(), network.dependencies()):
        print("check failed: chosen technologies miss a prerequisite", file=sys.stderr)
        ok = False
    for name in names:
        try:
            expected = CHECKERS[name](network)
        except ValueError as e:
            print(f"check failed: {name} could not run: {e}", file=sys.stderr)
            ok = False
            continue
        log(args, f"{name}: revenue {expected}")
        if expected != revenue:
            print(f"check failed: {name} found revenue {expected}, network found {revenue}",
                  file=sys.stderr)
            ok = False
    return ok


def main(argv=None) -> int:
    args = parse_args(argv)

    network = FlowNetwork()
    initialise(network, args)
    log(args, f"loaded {len(network)} technologies, {len(network.edges)} arcs")

    start_time = time.time()
    result = network.optimise()
    log(args, f"optimised in {time.time() - start_time:.3f} seconds, max flow {network.max_flow()}")

    sys.stdout.write(VERSION_HEADER + "\n")
    sys.stdout.write(format_result(result))
    sys.stdout.flush()

    if args.save:
        path = save_result_csv(result_frame(network), args.output_dir)
        log(args, f"[{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}] results saved to {path}")

    if args.check and not cross_check(network, args.check, args):
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
