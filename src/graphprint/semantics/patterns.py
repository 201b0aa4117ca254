"""Pattern detection extension point.

No concrete detector ships with graphprint. The pipeline calls whatever
:class:`PatternDetector` it is given; the default finds nothing, which keeps
``pattern_count`` at 0 and the evolution-score bonus off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from .models import PatternMatch

if TYPE_CHECKING:
    from ..graph.models import ProgramGraph


@runtime_checkable
class PatternDetector(Protocol):
    """Anything with ``detect(graph) -> Sequence[PatternMatch]``."""

    def detect(self, graph: ProgramGraph) -> Sequence[PatternMatch]: ...


class NullPatternDetector:
    """Detects no patterns."""

    def detect(self, graph: ProgramGraph) -> Sequence[PatternMatch]:
        return ()
