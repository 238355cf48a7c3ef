import os

import pytest

from flow_network import AddDependency, AddTechnology, FlowNetwork

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# (name, cost, profit) in the order of the sample configuration
CIVILISATION_TECHS = [
    ("bronze", 6, 2),
    ("iron", 6, 6),
    ("archery", 2, 3),
    ("horseback-riding", 10, 2),
    ("horse-archer", 0, 6),
    ("knights", 6, 12),
    ("mathematics", 6, 0),
    ("construction", 8, 4),
    ("currency", 2, 10),
]

CIVILISATION_DEPS = [
    ("iron", "bronze"),
    ("horse-archer", "archery"),
    ("horse-archer", "horseback-riding"),
    ("knights", "horseback-riding"),
    ("knights", "iron"),
    ("construction", "mathematics"),
    ("currency", "mathematics"),
]


@pytest.fixture
def civilisation_commands():
    return (
        [AddTechnology(name, profit, cost) for name, cost, profit in CIVILISATION_TECHS]
        + [AddDependency(a, b) for a, b in CIVILISATION_DEPS]
    )


@pytest.fixture
def civilisation(civilisation_commands):
    return FlowNetwork().apply(civilisation_commands)


@pytest.fixture
def sample_config_path():
    return os.path.join(ROOT, "test.txt")
