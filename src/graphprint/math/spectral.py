"""Spectral analysis: graph Laplacian, eigenvalue signatures, frequency peak.

The Laplacian is built on the simple undirected view of the program graph:
edge direction is discarded, parallel and antiparallel edges collapse into
one, and self-loops are left out (they would cancel in D - A anyway).
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..graph.algorithms import undirected_neighbors
from ..logging_config import get_logger

logger = get_logger(__name__)

# Eigenvalues below this are structural zeros (one per connected component)
_ZERO_TOLERANCE = 1e-8
# Signature precision; keeps relabeled copies of a graph on the same digest
_SIGNATURE_DECIMALS = 10


class SpectralMetrics:
    """Spectral calculations for program graphs."""

    @staticmethod
    def laplacian(adjacency: list[list[int]]) -> np.ndarray:
        """Unsigned Laplacian L = D - A of the simple undirected view."""
        n = len(adjacency)
        matrix = np.zeros((n, n), dtype=float)
        for i, neighbors in enumerate(undirected_neighbors(adjacency)):
            for j in neighbors:
                matrix[i, j] = -1.0
            matrix[i, i] = float(len(neighbors))
        return matrix

    @staticmethod
    def eigen_signature(
        adjacency: list[list[int]], length: int, padding: float
    ) -> tuple[float, ...]:
        """The ``length`` largest-magnitude Laplacian eigenvalues, descending.

        Signatures of graphs with fewer than ``length`` nodes are padded on
        the right with ``padding``. Eigensolver failures and non-finite values
        are replaced by ``padding`` rather than raised. Values are rounded to
        ``_SIGNATURE_DECIMALS`` places and near-zero values snapped to 0.
        """
        n = len(adjacency)
        if n == 0:
            return tuple([padding] * length)

        laplacian = SpectralMetrics.laplacian(adjacency)
        try:
            eigenvalues = np.linalg.eigvalsh(laplacian)
        except np.linalg.LinAlgError as e:
            logger.warning(f"Eigensolver failed on {n}-node graph, padding signature: {e}")
            return tuple([padding] * length)

        magnitudes = np.abs(eigenvalues)
        magnitudes = np.where(
            magnitudes < _ZERO_TOLERANCE, 0.0, np.round(magnitudes, _SIGNATURE_DECIMALS)
        )
        finite = np.isfinite(magnitudes)
        if not finite.all():
            logger.warning(
                f"{int((~finite).sum())} non-finite eigenvalues replaced by padding"
            )
            magnitudes = np.where(finite, magnitudes, padding)

        values = sorted((float(v) for v in magnitudes), reverse=True)[:length]
        values.extend([padding] * (length - len(values)))
        return tuple(values)

    @staticmethod
    def peak_bin(signal: Sequence[float]) -> int:
        """Index of the first DFT bin with maximum magnitude."""
        if not signal:
            return 0
        spectrum = np.fft.fft(np.asarray(signal, dtype=float))
        return int(np.argmax(np.abs(spectrum)))

    @staticmethod
    def resonance(signature: Sequence[float], base_frequency: float) -> float:
        """``base_frequency * (peak_bin + 1)``."""
        return base_frequency * (SpectralMetrics.peak_bin(signature) + 1)

    @staticmethod
    def coherence(
        signature: Sequence[float], connectivity: float, reference: float
    ) -> float:
        """clamp(connectivity / (1 + mean((λ - reference)²)), 0, 1)."""
        if not signature:
            return 0.0
        variance = sum((v - reference) ** 2 for v in signature) / len(signature)
        value = connectivity * (1.0 / (1.0 + variance))
        if math.isnan(value):
            return 0.0
        return max(0.0, min(1.0, value))
