"""Tests for graph/topology.py: TopologyProfile derivation."""

import pytest

from graphprint.graph.models import TopologyProfile
from graphprint.graph.topology import analyze_topology, connectivity_score


class TestConnectivityScore:
    def test_density(self):
        assert connectivity_score(3, 3) == pytest.approx(0.5)

    def test_small_graphs(self):
        assert connectivity_score(0, 0) == 0.0
        assert connectivity_score(1, 1) == 0.0

    def test_self_loops_and_back_edges_stay_in_range(self, make_graph):
        graph = make_graph(["Function", "Function"], [(0, 1), (1, 0), (0, 0), (1, 1)])
        profile = analyze_topology(graph)
        assert profile.connectivity_score == pytest.approx(1.0)
        assert profile.edge_count == 4

    def test_duplicate_edges_not_counted(self, make_graph):
        graph = make_graph(["Call", "Call", "Call"], [(0, 1), (0, 1), (0, 1), (1, 2)])
        assert analyze_topology(graph).connectivity_score == pytest.approx(2 / 6)


class TestAnalyzeTopology:
    def test_empty_graph_gives_default_profile(self, empty_graph):
        assert analyze_topology(empty_graph) == TopologyProfile()

    def test_triangle_cycle(self, triangle_cycle):
        profile = analyze_topology(triangle_cycle)
        assert profile.has_cycles
        assert not profile.is_dag
        assert profile.scc_count == 1
        assert profile.max_cycle_size == 3
        assert profile.recursion_present
        assert profile.cycle_count == 1
        assert profile.loop_complexity == 3
        assert profile.branching_factor == pytest.approx(1.0)
        assert profile.connectivity_score == pytest.approx(0.5)
        # Every node has a predecessor, so there is no root to measure from
        assert profile.max_nesting_depth == 0
        assert profile.clustering_coefficient == pytest.approx(1.0)
        assert profile.euler_characteristic == 0
        assert profile.betti_numbers == (1, 1)

    def test_diamond_dag(self, diamond_dag):
        profile = analyze_topology(diamond_dag)
        assert profile.is_dag
        assert not profile.has_cycles
        assert profile.scc_count == 3
        assert profile.max_cycle_size == 0
        assert not profile.recursion_present
        assert profile.max_nesting_depth == 1
        assert profile.diameter == profile.max_nesting_depth

    def test_self_loop(self, self_loop_graph):
        profile = analyze_topology(self_loop_graph)
        assert profile.has_cycles
        assert profile.recursion_present
        assert profile.max_cycle_size == 1
        assert profile.recursion_depth == 1
        assert profile.cycle_count == 0

    def test_small_tree(self, small_tree):
        profile = analyze_topology(small_tree)
        assert profile.is_dag
        assert profile.max_nesting_depth == 2
        assert profile.component_count == 1
        assert profile.betti_numbers == (1, 0)
        assert profile.signature == "scc:[1, 1, 1, 1]-branch:0.75-depth:2"

    def test_disconnected(self, disconnected_graph):
        profile = analyze_topology(disconnected_graph)
        assert profile.component_count == 2
        assert profile.max_nesting_depth == 2
        assert profile.node_count == 5
        assert profile.edge_count == 3
        assert profile.euler_characteristic == 2

    def test_is_dag_mirrors_has_cycles(self, triangle_cycle, diamond_dag, self_loop_graph):
        for graph in (triangle_cycle, diamond_dag, self_loop_graph):
            profile = analyze_topology(graph)
            assert profile.is_dag == (not profile.has_cycles)

    def test_modularity_in_unit_interval(self, disconnected_graph):
        profile = analyze_topology(disconnected_graph)
        assert 0.0 <= profile.modularity <= 1.0
