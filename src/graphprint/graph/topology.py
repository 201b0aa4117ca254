"""Topology analyzer: derive a TopologyProfile from a ProgramGraph."""

from ..logging_config import get_logger
from .algorithms import (
    clustering_coefficient,
    connected_components,
    distinct_arc_count,
    has_cycle,
    is_cyclic_component,
    max_nesting_depth,
    structural_modularity,
    tarjan_scc,
)
from .models import ProgramGraph, TopologyProfile

logger = get_logger(__name__)


def connectivity_score(node_count: int, arc_count: int) -> float:
    """Edge density ``arcs / (N*(N-1))`` in [0, 1]; 0 when N < 2.

    ``arc_count`` counts distinct ordered pairs without self-loops, so
    duplicate edges and recursion cannot push the score past 1.
    """
    if node_count < 2:
        return 0.0
    return arc_count / (node_count * (node_count - 1))


def analyze_topology(graph: ProgramGraph) -> TopologyProfile:
    """Compute the topological profile of a graph.

    Never raises: the empty graph yields the default (zeroed) profile.
    """
    n = graph.node_count()
    e = graph.edge_count()
    if n == 0:
        return TopologyProfile()

    adjacency = graph.adjacency()

    cyclic = has_cycle(adjacency)
    sccs = tarjan_scc(adjacency)
    cyclic_sccs = [scc for scc in sccs if is_cyclic_component(scc, adjacency)]
    multi_node = [scc for scc in sccs if len(scc) > 1]

    depth = max_nesting_depth(adjacency)
    components = len(connected_components(adjacency))
    branching = e / n

    profile = TopologyProfile(
        has_cycles=cyclic,
        is_dag=not cyclic,
        scc_count=len(sccs),
        max_cycle_size=max((len(scc) for scc in cyclic_sccs), default=0),
        branching_factor=branching,
        max_nesting_depth=depth,
        connectivity_score=connectivity_score(n, distinct_arc_count(adjacency)),
        recursion_present=bool(cyclic_sccs),
        node_count=n,
        edge_count=e,
        cycle_count=len(multi_node),
        loop_complexity=sum(len(scc) for scc in multi_node),
        recursion_depth=sum(1 for scc in cyclic_sccs if len(scc) == 1),
        component_count=components,
        euler_characteristic=n - e,
        diameter=depth,
        clustering_coefficient=clustering_coefficient(adjacency),
        modularity=structural_modularity(adjacency, components),
        betti_numbers=(components, max(0, e - n + components)),
        signature=f"scc:{[len(scc) for scc in sccs]}-branch:{branching:.2f}-depth:{depth}",
    )

    logger.debug(
        f"Topology: n={n}, e={e}, sccs={profile.scc_count}, "
        f"cycles={profile.has_cycles}, depth={depth}"
    )
    return profile
