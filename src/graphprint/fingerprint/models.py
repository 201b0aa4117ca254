"""Fingerprint data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..graph.models import TopologyProfile
from ..semantics.models import SemanticProfile
from ..semantics.operations import OperationSpectrum

# K largest-magnitude Laplacian eigenvalues, descending, padded to length K
SpectralSignature = Tuple[float, ...]


@dataclass(frozen=True)
class Fingerprint:
    """Immutable structural summary of a ProgramGraph, compared by value.

    Hashable by ``content_hash``, so fingerprints can key dicts and sets.

    Attributes:
        signature: Spectral signature (length K)
        topology: Topological profile
        semantics: Complexity and pattern profile
        operations: Normalized operation-category distribution
        resonance: Scaled peak frequency of the signature's DFT
        coherence: Connectivity damped by eigenvalue spread, in [0, 1]
        evolution_score: Modularity/complexity/coherence composite, in [0, 1]
        content_hash: SHA-256 hex digest of the hashed invariants
    """

    signature: SpectralSignature
    topology: TopologyProfile
    semantics: SemanticProfile
    operations: OperationSpectrum
    resonance: float
    coherence: float
    evolution_score: float
    content_hash: str

    def __hash__(self) -> int:
        # Mapping fields are unhashable; equal fingerprints share a content hash
        return hash(self.content_hash)

    @property
    def signature_length(self) -> int:
        return len(self.signature)

    @property
    def short_hash(self) -> str:
        return self.content_hash[:16]

    def __repr__(self) -> str:
        return (
            f"Fingerprint({self.short_hash}, nodes={self.topology.node_count}, "
            f"resonance={self.resonance:.1f}, coherence={self.coherence:.3f})"
        )
