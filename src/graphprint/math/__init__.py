"""Mathematical utilities for structural fingerprints."""

from .entropy import Entropy
from .spectral import SpectralMetrics

__all__ = ["Entropy", "SpectralMetrics"]
