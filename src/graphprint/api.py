"""Public API for graphprint.

Example:
    >>> from graphprint import ProgramGraph, fingerprint, compare
    >>>
    >>> graph = ProgramGraph()
    >>> fn = graph.add_node("Function", "fib")
    >>> branch = graph.add_node("If")
    >>> graph.add_edge(fn, branch)
    >>> fp = fingerprint(graph)
    >>> compare(fp, fp)
    1.0
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG, FingerprintConfig
from .fingerprint.comparator import are_equivalent, similarity
from .fingerprint.models import Fingerprint
from .fingerprint.pipeline import FingerprintPipeline
from .graph.models import ProgramGraph
from .logging_config import get_logger
from .semantics.patterns import PatternDetector

logger = get_logger(__name__)


def fingerprint(
    graph: ProgramGraph,
    config: Optional[FingerprintConfig] = None,
    detector: Optional[PatternDetector] = None,
) -> Fingerprint:
    """Fingerprint a program graph.

    Raises:
        GraphTooLargeError: If the graph exceeds ``config.max_nodes``
    """
    return FingerprintPipeline(config, detector).run(graph)


def fingerprint_many(
    graphs: Sequence[ProgramGraph],
    config: Optional[FingerprintConfig] = None,
    workers: Optional[int] = None,
    detector: Optional[PatternDetector] = None,
) -> list[Fingerprint]:
    """Fingerprint independent graphs concurrently; results keep input order.

    Every task builds its own pipeline, so no classifier state is shared.
    The first failure is re-raised after the pool shuts down.
    """
    config = config or DEFAULT_CONFIG
    max_workers = workers or config.workers

    if len(graphs) < 2 or max_workers == 1:
        return [fingerprint(g, config, detector) for g in graphs]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(fingerprint, g, config, detector) for g in graphs]
        results = [future.result() for future in futures]

    logger.debug(f"Fingerprinted {len(results)} graphs")
    return results


def compare(a: Fingerprint, b: Fingerprint) -> float:
    """Similarity score in (0, 1].

    Raises:
        StructuralPreconditionError: If the signatures differ in length
    """
    return similarity(a, b)


def equivalent(
    a: Fingerprint,
    b: Fingerprint,
    threshold: Optional[float] = None,
    config: Optional[FingerprintConfig] = None,
    require_same_order: bool = False,
) -> bool:
    """True iff ``compare(a, b) > threshold`` (default: config.equivalence_threshold)."""
    if threshold is None:
        threshold = (config or DEFAULT_CONFIG).equivalence_threshold
    return are_equivalent(a, b, threshold, require_same_order=require_same_order)
