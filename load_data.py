from typing import Dict, Iterator, List, Optional
import pandas as pd

from errors import ConfigNotFound, MalformedConfig, TruncatedConfig
from flow_network import AddDependency, AddTechnology, Command

SEPARATOR = "->"


class _Tokens:
    """Whitespace separated token stream over a configuration text."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())
        self.position = 0

    def next(self, what: str) -> str:
        try:
            token = next(self._it)
        except StopIteration:
            raise TruncatedConfig(
                f"expected {what} after token {self.position}"
            ) from None
        self.position += 1
        return token

    def next_int(self, what: str) -> int:
        token = self.next(what)
        try:
            return int(token)
        except ValueError:
            raise MalformedConfig(
                f"expected an integer {what} at token {self.position}, got '{token}'"
            ) from None


def parse_config(text: str) -> List[Command]:
    """
    Parse a configuration text into build commands.

    Format
    ------
        <technologies> <dependencies>
        <name> <cost> <profit>        (one line per technology)
        <dependent> -> <required>     (one line per dependency)

    Tokens may be separated by any whitespace; anything after the declared
    counts is ignored.
    """
    tokens = _Tokens(text)
    tech_count = tokens.next_int("technology count")
    dep_count = tokens.next_int("dependency count")
    if tech_count < 0 or dep_count < 0:
        raise MalformedConfig("section counts must not be negative")

    commands: List[Command] = []

    # first section defines available technologies
    for _ in range(tech_count):
        name = tokens.next("technology name")
        cost = tokens.next_int("cost")
        profit = tokens.next_int("profit")
        commands.append(AddTechnology(name, profit, cost))

    # second section links depending technologies
    for _ in range(dep_count):
        dependent = tokens.next("technology name")
        sep = tokens.next(f"'{SEPARATOR}'")
        if sep != SEPARATOR:
            raise MalformedConfig(
                f"expected a separator of form '{SEPARATOR}', got '{sep}'"
            )
        required = tokens.next("technology name")
        commands.append(AddDependency(dependent, required))

    return commands


def read_config(file_path: str) -> List[Command]:
    try:
        with open(file_path, "r") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ConfigNotFound(str(e)) from e
    return parse_config(text)


# ---------------------------------------------------------------------
# Tabular input
# ---------------------------------------------------------------------

def _read_csv(file_path: str) -> pd.DataFrame:
    try:
        return pd.read_csv(file_path, skipinitialspace=True)
    except FileNotFoundError as e:
        raise ConfigNotFound(str(e)) from e


def _require_columns(df: pd.DataFrame, columns: List[str], file_path: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MalformedConfig(f"'{file_path}' is missing columns: {missing}")


class Technologies:

    def __init__(self, file_path: str, name_colname: str = "name",
                 cost_colname: str = "cost", profit_colname: str = "profit"):
        self.file_path = file_path
        self.name_colname = name_colname
        self.cost_colname = cost_colname
        self.profit_colname = profit_colname
        self.technologies_df = _read_csv(file_path)
        _require_columns(
            self.technologies_df, [name_colname, cost_colname, profit_colname], file_path
        )
        self.technologies_df = self.technologies_df.dropna(subset=[name_colname])

    def convert_column_types(self, column_types: Optional[Dict[str, type]] = None) -> None:
        """
        Convert columns to their requested types; by default names to str and
        cost / profit to int.

        Args:
            column_types: Dictionary mapping column names to their desired types
        """
        if column_types is None:
            column_types = {
                self.name_colname: str,
                self.cost_colname: int,
                self.profit_colname: int,
            }
        for col, dtype in column_types.items():
            series = self.technologies_df[col]
            if (dtype is int and pd.api.types.is_float_dtype(series)
                    and not (series == series.round()).all()):
                raise MalformedConfig(
                    f"column '{col}' of '{self.file_path}' holds non-integer values"
                )
            try:
                self.technologies_df[col] = self.technologies_df[col].astype(dtype)
            except (ValueError, TypeError) as e:
                raise MalformedConfig(f"column '{col}' of '{self.file_path}': {e}") from e

    def find_duplicates(self) -> pd.DataFrame:
        """
        All rows whose technology name occurs more than once, sorted by name.
        """
        duplicates = self.technologies_df[self.technologies_df.duplicated(
            subset=[self.name_colname],
            keep=False
        )]
        if not duplicates.empty:
            duplicates = duplicates.sort_values(self.name_colname)
        return duplicates

    def to_commands(self) -> List[AddTechnology]:
        return [
            AddTechnology(str(row[self.name_colname]),
                          int(row[self.profit_colname]),
                          int(row[self.cost_colname]))
            for _, row in self.technologies_df.iterrows()
        ]


class Dependencies:

    def __init__(self, file_path: str, from_colname: str = "from", to_colname: str = "to"):
        self.file_path = file_path
        self.from_colname = from_colname
        self.to_colname = to_colname
        self.dependencies_df = _read_csv(file_path)
        _require_columns(self.dependencies_df, [from_colname, to_colname], file_path)
        # fully blank rows carry nothing; half a dependency is an error
        self.dependencies_df = self.dependencies_df.dropna(how="all", subset=[from_colname, to_colname])
        incomplete = self.dependencies_df[
            self.dependencies_df[[from_colname, to_colname]].isna().any(axis=1)
        ]
        if not incomplete.empty:
            rows = ", ".join(str(i + 2) for i in incomplete.index)
            raise MalformedConfig(f"'{file_path}' has dependencies with a missing end on rows {rows}")

    def to_commands(self) -> List[AddDependency]:
        return [
            AddDependency(str(row[self.from_colname]), str(row[self.to_colname]))
            for _, row in self.dependencies_df.iterrows()
        ]


def load_tables(technologies_path: str, dependencies_path: Optional[str] = None) -> List[Command]:
    """
    Build commands from a technologies CSV and an optional dependencies CSV.
    All technologies are declared before any dependency.
    """
    techs = Technologies(technologies_path)
    techs.convert_column_types()

    commands: List[Command] = list(techs.to_commands())
    if dependencies_path is not None:
        commands.extend(Dependencies(dependencies_path).to_commands())
    return commands
