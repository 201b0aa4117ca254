"""Spectral fingerprints and their comparison."""

from .comparator import (
    are_equivalent,
    eigen_distance,
    resonance_check,
    resonates,
    similarity,
    topology_distance,
)
from .models import Fingerprint, SpectralSignature
from .pipeline import FingerprintPipeline, content_hash, evolution_score
from .registry import FingerprintRegistry, Manifestation, Registration, RegistryEntry
from .serializers import fingerprint_from_record, fingerprint_to_record

__all__ = [
    "Fingerprint",
    "FingerprintPipeline",
    "FingerprintRegistry",
    "Manifestation",
    "Registration",
    "RegistryEntry",
    "SpectralSignature",
    "are_equivalent",
    "content_hash",
    "eigen_distance",
    "evolution_score",
    "fingerprint_from_record",
    "fingerprint_to_record",
    "resonance_check",
    "resonates",
    "similarity",
    "topology_distance",
]
