"""Semantic data models.

SemanticProfile holds the control-flow complexity measures of a program
graph together with its detected structural patterns and operation mix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .operations import OperationCategory


@dataclass(frozen=True)
class PatternMatch:
    """A structural pattern found in a program graph.

    Attributes:
        pattern_type: Detector-specific label (e.g. "visitor", "memoized_recursion")
        frequency: Relative prevalence of the pattern in the graph
        digest: Stable hash of the matched structure
    """

    pattern_type: str
    frequency: float = 0.0
    digest: str = ""


@dataclass(frozen=True)
class SemanticProfile:
    """Complexity and pattern summary.

    ``cognitive`` is defined as twice ``cyclomatic``. That is a simplification
    kept for fingerprint stability, not a general cognitive-complexity metric.
    """

    cyclomatic: int = 0
    cognitive: int = 0
    dependency_depth: int = 0
    pattern_count: int = 0
    patterns: tuple[PatternMatch, ...] = ()
    operations: Mapping[OperationCategory, float] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __hash__(self) -> int:
        return hash(
            (self.cyclomatic, self.cognitive, self.dependency_depth, self.pattern_count, self.patterns)
        )
