"""Shared test fixtures for graphprint tests."""

import pytest

from graphprint.graph.models import EdgeKind, ProgramGraph


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def build_graph(kinds, edges):
    """Graph with one node per kind tag and child edges from (src, tgt) pairs."""
    graph = ProgramGraph()
    for kind in kinds:
        graph.add_node(kind)
    for src, tgt in edges:
        graph.add_edge(src, tgt)
    return graph


@pytest.fixture
def empty_graph():
    """Graph with no nodes."""
    return ProgramGraph()


@pytest.fixture
def single_node_graph():
    """One node, no edges."""
    return build_graph(["Function"], [])


@pytest.fixture
def self_loop_graph():
    """One node calling itself: direct recursion."""
    graph = ProgramGraph()
    fn = graph.add_node("Function", "fact")
    graph.add_edge(fn, fn, EdgeKind.REFERENCE)
    return graph


@pytest.fixture
def triangle_cycle():
    """A -> B -> C -> A."""
    return build_graph(["Function", "Call", "Call"], [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def diamond_dag():
    """A -> B, A -> C, B -> C."""
    return build_graph(["Function", "If", "Return"], [(0, 1), (0, 2), (1, 2)])


@pytest.fixture
def small_tree():
    """0 -> 1, 0 -> 2, 1 -> 3."""
    return build_graph(["Function", "If", "Return", "+"], [(0, 1), (0, 2), (1, 3)])


@pytest.fixture
def disconnected_graph():
    """Two separate chains: 0 -> 1 and 2 -> 3 -> 4."""
    return build_graph(["Let", "=", "For", "Call", "Return"], [(0, 1), (2, 3), (3, 4)])


@pytest.fixture
def make_graph():
    """Factory fixture: make_graph(kinds, edges)."""
    return build_graph
