"""Fingerprint pipeline: ProgramGraph -> Fingerprint.

Stages, in order:
  1. Topology profile (cycles, SCCs, depth, clustering, modularity)
  2. Operation spectrum (fresh classifier per call)
  3. Semantic profile (cyclomatic/cognitive complexity, patterns)
  4. Spectral signature from the Laplacian eigenvalues
  5. Resonance, coherence and evolution score
  6. Content hash over a fixed-order byte encoding
"""

from __future__ import annotations

import hashlib
import struct
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, FingerprintConfig
from ..exceptions import GraphTooLargeError
from ..graph.models import ProgramGraph, TopologyProfile
from ..graph.topology import analyze_topology
from ..logging_config import get_logger
from ..math.spectral import SpectralMetrics
from ..semantics.analyzer import SemanticAnalyzer
from ..semantics.models import SemanticProfile
from ..semantics.operations import OperationClassifier
from ..semantics.patterns import PatternDetector
from .models import Fingerprint

logger = get_logger(__name__)


def evolution_score(topology: TopologyProfile, semantics: SemanticProfile, coherence: float) -> float:
    """clamp(modularity * complexity_penalty * coherence + pattern_bonus, 0, 1).

    complexity_penalty = 1 / (1 + cyclomatic / 10), pattern_bonus = patterns / 10.
    """
    complexity_penalty = 1.0 / (1.0 + semantics.cyclomatic / 10.0)
    pattern_bonus = semantics.pattern_count / 10.0
    score = topology.modularity * complexity_penalty * coherence + pattern_bonus
    return max(0.0, min(1.0, score))


def content_hash(
    signature: Sequence[float], topology: TopologyProfile, semantics: SemanticProfile
) -> str:
    """SHA-256 over little-endian bytes, in this fixed order:

    eigenvalues (f64 each), Euler characteristic (i64), diameter (u64),
    clustering coefficient (f64), cyclomatic (u64), cognitive (u64).
    """
    hasher = hashlib.sha256()
    for value in signature:
        hasher.update(struct.pack("<d", value))
    hasher.update(struct.pack("<q", topology.euler_characteristic))
    hasher.update(struct.pack("<Q", topology.diameter))
    hasher.update(struct.pack("<d", topology.clustering_coefficient))
    hasher.update(struct.pack("<Q", semantics.cyclomatic))
    hasher.update(struct.pack("<Q", semantics.cognitive))
    return hasher.hexdigest()


class FingerprintPipeline:
    """Builds fingerprints. One pipeline per thread: it owns a classifier.

    Args:
        config: Fingerprint configuration (default: DEFAULT_CONFIG)
        detector: Optional pattern detector for the semantic stage
    """

    def __init__(
        self,
        config: Optional[FingerprintConfig] = None,
        detector: Optional[PatternDetector] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.classifier = OperationClassifier()
        self.semantic_analyzer = SemanticAnalyzer(detector)

    def run(self, graph: ProgramGraph) -> Fingerprint:
        """Fingerprint a single graph.

        Raises:
            GraphTooLargeError: If the graph exceeds ``config.max_nodes``
        """
        config = self.config
        n = graph.node_count()
        if config.max_nodes is not None and n > config.max_nodes:
            raise GraphTooLargeError(n, config.max_nodes)

        topology = analyze_topology(graph)

        self.classifier.reset()
        self.classifier.classify_graph(graph)
        operations = self.classifier.frequency_spectrum()

        semantics = self.semantic_analyzer.analyze(graph, topology=topology, operations=operations)

        signature = SpectralMetrics.eigen_signature(
            graph.adjacency(), config.signature_length, config.padding_value
        )
        resonance = SpectralMetrics.resonance(signature, config.base_frequency)
        coherence = SpectralMetrics.coherence(
            signature, topology.connectivity_score, config.padding_value
        )
        evolution = evolution_score(topology, semantics, coherence)
        digest = content_hash(signature, topology, semantics)

        logger.debug(
            f"Fingerprint {digest[:16]}: n={n}, e={graph.edge_count()}, "
            f"resonance={resonance:.1f}, coherence={coherence:.4f}, "
            f"evolution={evolution:.4f}, harmonic={self.classifier.harmonic_complexity():.3f}"
        )

        return Fingerprint(
            signature=signature,
            topology=topology,
            semantics=semantics,
            operations=operations,
            resonance=resonance,
            coherence=coherence,
            evolution_score=evolution,
            content_hash=digest,
        )
