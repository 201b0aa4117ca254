"""Semantic analyzer: cyclomatic/cognitive complexity, depth, patterns."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from ..graph.algorithms import connected_components, max_nesting_depth
from ..graph.models import ProgramGraph, TopologyProfile
from ..logging_config import get_logger
from .models import SemanticProfile
from .operations import OperationSpectrum
from .patterns import NullPatternDetector, PatternDetector

logger = get_logger(__name__)


def cyclomatic_complexity(node_count: int, edge_count: int, components: int) -> int:
    """McCabe ``E - N + 2P``, floored at 0."""
    return max(0, edge_count - node_count + 2 * components)


class SemanticAnalyzer:
    """Computes a SemanticProfile for a program graph.

    Args:
        detector: Pattern detector to run (default: finds nothing)
    """

    def __init__(self, detector: Optional[PatternDetector] = None):
        self.detector = detector or NullPatternDetector()

    def analyze(
        self,
        graph: ProgramGraph,
        topology: Optional[TopologyProfile] = None,
        operations: Optional[OperationSpectrum] = None,
    ) -> SemanticProfile:
        """Analyze ``graph``.

        A precomputed ``topology`` is reused for the component count and the
        dependency depth; otherwise both are computed here.
        """
        n = graph.node_count()
        e = graph.edge_count()

        if topology is not None and topology.node_count == n:
            components = topology.component_count
            depth = topology.max_nesting_depth
        else:
            adjacency = graph.adjacency()
            components = len(connected_components(adjacency))
            depth = max_nesting_depth(adjacency)

        cyclomatic = cyclomatic_complexity(n, e, components)
        patterns = tuple(self.detector.detect(graph))

        logger.debug(
            f"Semantics: cyclomatic={cyclomatic}, depth={depth}, patterns={len(patterns)}"
        )

        return SemanticProfile(
            cyclomatic=cyclomatic,
            cognitive=2 * cyclomatic,
            dependency_depth=depth,
            pattern_count=len(patterns),
            patterns=patterns,
            operations=operations if operations is not None else MappingProxyType({}),
        )
