import os

import pytest

from errors import (
    ConfigError,
    ConfigNotFound,
    MalformedConfig,
    TruncatedConfig,
    UnknownTechnologyReference,
)
from flow_network import AddDependency, AddTechnology, build_network
from load_data import Dependencies, Technologies, load_tables, parse_config, read_config

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def test_sample_config(sample_config_path, civilisation_commands):
    commands = read_config(sample_config_path)
    assert commands == civilisation_commands


def test_cost_comes_before_profit():
    commands = parse_config("1 0\nbronze 6 2\n")
    assert commands == [AddTechnology("bronze", profit=2, cost=6)]


def test_any_whitespace_separates_tokens():
    text = "2 1 iron 6 6\tbronze\n6 2   iron -> bronze"
    assert parse_config(text) == [
        AddTechnology("iron", 6, 6),
        AddTechnology("bronze", 2, 6),
        AddDependency("iron", "bronze"),
    ]


def test_trailing_tokens_are_ignored():
    assert parse_config("0 0 whatever comes next") == []


def test_bad_separator():
    with pytest.raises(MalformedConfig):
        parse_config("2 1\na 1 1\nb 1 1\na => b\n")


def test_non_integer_cost():
    with pytest.raises(MalformedConfig) as info:
        parse_config("1 0\nbronze six 2\n")
    assert "six" in str(info.value)


def test_negative_counts():
    with pytest.raises(MalformedConfig):
        parse_config("-1 0")


@pytest.mark.parametrize("text", ["", "3", "2 0\nbronze 6 2\n", "1 1\nbronze 6 2\nbronze ->"])
def test_truncated(text):
    with pytest.raises(TruncatedConfig):
        parse_config(text)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigNotFound) as info:
        read_config(str(tmp_path / "nope.txt"))
    assert isinstance(info.value, ConfigError)
    assert info.value.reason == "was not found"


def test_parsed_forward_reference_fails_at_build():
    commands = parse_config("1 1\niron 6 6\niron -> bronze\n")
    with pytest.raises(UnknownTechnologyReference):
        build_network(commands)


# ------------------------------------------------------------------ CSV tables

def test_csv_tables(civilisation_commands):
    commands = load_tables(
        os.path.join(ROOT, "data", "technologies.csv"),
        os.path.join(ROOT, "data", "dependencies.csv"),
    )
    assert commands == civilisation_commands


def test_csv_without_dependencies():
    commands = load_tables(os.path.join(ROOT, "data", "technologies.csv"))
    assert all(isinstance(c, AddTechnology) for c in commands)
    assert len(commands) == 9


def test_csv_custom_columns(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("tech,dev,sale\nwheel,3,5\n")
    techs = Technologies(str(path), name_colname="tech", cost_colname="dev", profit_colname="sale")
    techs.convert_column_types()
    assert techs.to_commands() == [AddTechnology("wheel", 5, 3)]


def test_csv_missing_column(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("name,cost\nwheel,3\n")
    with pytest.raises(MalformedConfig):
        Technologies(str(path))


def test_csv_bad_number(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("name,cost,profit\nwheel,cheap,5\n")
    techs = Technologies(str(path))
    with pytest.raises(MalformedConfig):
        techs.convert_column_types()


def test_csv_duplicates(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("name,cost,profit\nwheel,3,5\niron,1,1\nwheel,2,2\n")
    dups = Technologies(str(path)).find_duplicates()
    assert list(dups["name"]) == ["wheel", "wheel"]


def test_csv_dependencies(tmp_path):
    path = tmp_path / "deps.csv"
    path.write_text("from,to\nknights,iron\n")
    assert Dependencies(str(path)).to_commands() == [AddDependency("knights", "iron")]


def test_csv_missing_file(tmp_path):
    with pytest.raises(ConfigNotFound):
        load_tables(str(tmp_path / "missing.csv"))


def test_csv_fractional_cost(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("name,cost,profit\nwheel,2.9,3\n")
    with pytest.raises(MalformedConfig):
        load_tables(str(path))


def test_csv_whole_floats_are_accepted(tmp_path):
    path = tmp_path / "techs.csv"
    path.write_text("name,cost,profit\nwheel,2.0,3\n")
    assert load_tables(str(path)) == [AddTechnology("wheel", 3, 2)]


def test_csv_dependency_missing_end(tmp_path):
    techs = tmp_path / "techs.csv"
    techs.write_text("name,cost,profit\na,0,10\nb,20,0\n")
    deps = tmp_path / "deps.csv"
    deps.write_text("from,to\na,\n")
    with pytest.raises(MalformedConfig) as info:
        load_tables(str(techs), str(deps))
    assert "rows 2" in str(info.value)


def test_csv_blank_dependency_rows_are_skipped(tmp_path):
    path = tmp_path / "deps.csv"
    path.write_text("from,to\nknights,iron\n,\n")
    assert Dependencies(str(path)).to_commands() == [AddDependency("knights", "iron")]
