"""Fingerprint comparison: similarity score, equivalence, registry resonance.

similarity(a, b) = 1 / (1 + eigen_distance + topology_distance)

    eigen_distance    = ||sig_a - sig_b||₂
    topology_distance = |Δeuler| / 100 + |Δclustering| + |Δmodularity|

The score lies in (0, 1], decreases with distance and is 1 only when both
distances are zero.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, FingerprintConfig
from ..exceptions import StructuralPreconditionError
from .models import Fingerprint


def eigen_distance(left: Sequence[float], right: Sequence[float]) -> float:
    """Euclidean distance between two signatures of equal length.

    Raises:
        StructuralPreconditionError: If the lengths differ
    """
    if len(left) != len(right):
        raise StructuralPreconditionError(len(left), len(right))
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(left, right)))


def topology_distance(a: Fingerprint, b: Fingerprint) -> float:
    ta, tb = a.topology, b.topology
    return (
        abs(ta.euler_characteristic - tb.euler_characteristic) / 100.0
        + abs(ta.clustering_coefficient - tb.clustering_coefficient)
        + abs(ta.modularity - tb.modularity)
    )


def similarity(a: Fingerprint, b: Fingerprint) -> float:
    """Resonance score in (0, 1]; symmetric, 1.0 for identical inputs."""
    distance = eigen_distance(a.signature, b.signature) + topology_distance(a, b)
    return 1.0 / (1.0 + distance)


def are_equivalent(
    a: Fingerprint,
    b: Fingerprint,
    threshold: float = DEFAULT_CONFIG.equivalence_threshold,
    require_same_order: bool = False,
) -> bool:
    """True iff ``similarity(a, b) > threshold``.

    Graphs smaller than the signature length are padded with the same
    constant, so two different tiny graphs can look identical. Pass
    ``require_same_order=True`` to also demand equal node counts.
    """
    if require_same_order and a.topology.node_count != b.topology.node_count:
        return False
    return similarity(a, b) > threshold


# ── Cross-registry resonance check ─────────────────────────────────


def eigen_similarity(a: Fingerprint, b: Fingerprint) -> float:
    return 1.0 / (1.0 + eigen_distance(a.signature, b.signature))


def topology_similarity(a: Fingerprint, b: Fingerprint) -> float:
    """Mean of the three per-invariant similarities, each clamped to [0, 1]."""
    ta, tb = a.topology, b.topology
    terms = (
        1.0 - abs(ta.euler_characteristic - tb.euler_characteristic) / 100.0,
        1.0 - abs(ta.clustering_coefficient - tb.clustering_coefficient),
        1.0 - abs(ta.modularity - tb.modularity),
    )
    return sum(max(0.0, min(1.0, t)) for t in terms) / 3.0


def resonance_check(
    a: Fingerprint, b: Fingerprint, config: Optional[FingerprintConfig] = None
) -> float:
    """Weighted registry score: eigen (0.5) + topology (0.3) + coherence-in-tune (0.2)."""
    config = config or DEFAULT_CONFIG
    weights = config.weights
    in_tune = abs(a.coherence - b.coherence) < config.coherence_tolerance
    return (
        weights.eigen * eigen_similarity(a, b)
        + weights.topology * topology_similarity(a, b)
        + (weights.coherence if in_tune else 0.0)
    )


def resonates(a: Fingerprint, b: Fingerprint, config: Optional[FingerprintConfig] = None) -> bool:
    """True when the resonance check reaches ``config.registry_threshold``."""
    config = config or DEFAULT_CONFIG
    return resonance_check(a, b, config) >= config.registry_threshold
