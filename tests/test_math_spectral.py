"""Tests for math/spectral.py: Laplacian, signature, resonance, coherence."""

import numpy as np
import pytest

from graphprint.config import BASE_FREQUENCY, PHI
from graphprint.math.spectral import SpectralMetrics


class TestLaplacian:
    def test_triangle(self):
        laplacian = SpectralMetrics.laplacian([[1], [2], [0]])
        expected = np.array([[2, -1, -1], [-1, 2, -1], [-1, -1, 2]], dtype=float)
        assert np.array_equal(laplacian, expected)

    def test_symmetric_for_directed_input(self):
        laplacian = SpectralMetrics.laplacian([[1, 2], [2], []])
        assert np.array_equal(laplacian, laplacian.T)

    def test_rows_sum_to_zero(self):
        laplacian = SpectralMetrics.laplacian([[1, 1], [0, 2], [2]])
        assert np.allclose(laplacian.sum(axis=1), 0.0)

    def test_self_loop_ignored(self):
        assert np.array_equal(SpectralMetrics.laplacian([[0]]), np.zeros((1, 1)))


class TestEigenSignature:
    def test_empty_graph_all_padding(self):
        assert SpectralMetrics.eigen_signature([], 7, PHI) == (PHI,) * 7

    def test_length_always_k(self):
        for n in (1, 3, 7, 12):
            adjacency = [[i + 1] for i in range(n - 1)] + [[]]
            assert len(SpectralMetrics.eigen_signature(adjacency, 7, PHI)) == 7

    def test_triangle_values(self):
        signature = SpectralMetrics.eigen_signature([[1], [2], [0]], 7, PHI)
        assert signature[:3] == pytest.approx((3.0, 3.0, 0.0), abs=1e-9)
        assert signature[3:] == (PHI,) * 4

    def test_path_values(self):
        # P4 Laplacian spectrum: 2 + sqrt(2), 2, 2 - sqrt(2), 0
        signature = SpectralMetrics.eigen_signature([[1], [2], [3], []], 4, PHI)
        expected = (2 + np.sqrt(2), 2.0, 2 - np.sqrt(2), 0.0)
        assert signature == pytest.approx(expected, abs=1e-9)

    def test_truncates_to_largest(self):
        # Star with 5 leaves: spectrum 6, 1, 1, 1, 1, 0
        adjacency = [[1, 2, 3, 4, 5], [], [], [], [], []]
        signature = SpectralMetrics.eigen_signature(adjacency, 2, PHI)
        assert signature == pytest.approx((6.0, 1.0), abs=1e-9)

    def test_descending(self):
        adjacency = [[1, 2], [3], [3], [4], []]
        signature = SpectralMetrics.eigen_signature(adjacency, 5, PHI)
        assert list(signature) == sorted(signature, reverse=True)

    def test_zero_eigenvalue_is_exact(self):
        signature = SpectralMetrics.eigen_signature([[1], [2], [0]], 3, PHI)
        assert signature[2] == 0.0
        assert signature[:2] == (3.0, 3.0)

    def test_relabeled_graph_same_signature(self):
        # C9 plus a chord, then every node i renamed to 4i mod 9
        edges = [(i, (i + 1) % 9) for i in range(9)] + [(0, 4)]
        original = [[] for _ in range(9)]
        relabeled = [[] for _ in range(9)]
        for src, tgt in edges:
            original[src].append(tgt)
            relabeled[(4 * src) % 9].append((4 * tgt) % 9)
        assert SpectralMetrics.eigen_signature(original, 9, PHI) == SpectralMetrics.eigen_signature(
            relabeled, 9, PHI
        )

    def test_solver_failure_falls_back_to_padding(self, monkeypatch):
        def fail(_matrix):
            raise np.linalg.LinAlgError("did not converge")

        monkeypatch.setattr(np.linalg, "eigvalsh", fail)
        assert SpectralMetrics.eigen_signature([[1], []], 3, PHI) == (PHI,) * 3

    def test_non_finite_values_replaced(self, monkeypatch):
        monkeypatch.setattr(np.linalg, "eigvalsh", lambda _m: np.array([np.nan, 2.0]))
        signature = SpectralMetrics.eigen_signature([[1], []], 3, PHI)
        assert signature == (2.0, PHI, PHI)


class TestResonance:
    def test_peak_bin_constant_signal(self):
        assert SpectralMetrics.peak_bin([1.0, 1.0, 1.0]) == 0

    def test_peak_bin_alternating(self):
        assert SpectralMetrics.peak_bin([1.0, -1.0, 1.0, -1.0]) == 2

    def test_peak_bin_empty(self):
        assert SpectralMetrics.peak_bin([]) == 0

    def test_non_negative_signature_peaks_at_dc(self):
        signature = SpectralMetrics.eigen_signature([[1], [2], [0]], 7, PHI)
        assert SpectralMetrics.resonance(signature, BASE_FREQUENCY) == BASE_FREQUENCY

    def test_scales_with_bin(self):
        assert SpectralMetrics.resonance([1.0, -1.0, 1.0, -1.0], 10.0) == 30.0


class TestCoherence:
    def test_zero_connectivity(self):
        assert SpectralMetrics.coherence((3.0, 0.0), 0.0, PHI) == 0.0

    def test_signature_at_reference(self):
        assert SpectralMetrics.coherence((PHI,) * 7, 0.5, PHI) == pytest.approx(0.5)

    def test_formula(self):
        signature = (3.0, 3.0, 0.0) + (PHI,) * 4
        variance = (2 * (3.0 - PHI) ** 2 + PHI ** 2) / 7
        expected = 0.5 / (1.0 + variance)
        assert SpectralMetrics.coherence(signature, 0.5, PHI) == pytest.approx(expected)

    def test_clamped(self):
        assert SpectralMetrics.coherence((PHI,), 3.0, PHI) == 1.0

    def test_empty_signature(self):
        assert SpectralMetrics.coherence((), 0.5, PHI) == 0.0
