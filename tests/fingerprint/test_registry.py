"""Tests for fingerprint/registry.py."""

import threading

import pytest

from graphprint import fingerprint
from graphprint.config import FingerprintConfig
from graphprint.fingerprint.registry import FingerprintRegistry


@pytest.fixture
def registry():
    return FingerprintRegistry()


class TestRegister:
    def test_first_registration_is_new(self, registry, small_tree):
        fp = fingerprint(small_tree)
        result = registry.register(fp, language="python", source_id="a.py")
        assert result.is_new
        assert result.entry_id == f"fp:{fp.short_hash}"
        assert len(registry) == 1
        assert result.entry_id in registry

    def test_same_structure_joins_entry(self, registry, make_graph):
        py = fingerprint(make_graph(["Function", "If", "Return"], [(0, 1), (1, 2)]))
        rs = fingerprint(make_graph(["fn", "if", "return"], [(0, 1), (1, 2)]))

        first = registry.register(py, language="python")
        second = registry.register(rs, language="rust")

        assert not second.is_new
        assert second.entry_id == first.entry_id
        entry = registry.get(first.entry_id)
        assert entry.evolution_count == 1
        assert len(entry.manifestations) == 2
        assert entry.languages == ["python", "rust"]
        assert entry.fingerprint is py

    def test_dissimilar_structures_get_separate_entries(self, registry, empty_graph, triangle_cycle):
        registry.register(fingerprint(empty_graph))
        result = registry.register(fingerprint(triangle_cycle))
        assert result.is_new
        assert len(registry) == 2

    def test_id_collision_gets_suffix(self, small_tree):
        registry = FingerprintRegistry()
        fp = fingerprint(small_tree)
        registry.register(fp)
        # Without the coherence term an identical candidate scores 0.8, below 0.85
        registry.config = FingerprintConfig(coherence_tolerance=0.0)
        result = registry.register(fp)
        assert result.is_new
        assert result.entry_id == f"fp:{fp.short_hash}-2"

    def test_get_missing(self, registry):
        assert registry.get("fp:nope") is None


class TestQueries:
    def test_find_resonant(self, registry, small_tree, triangle_cycle):
        fp = fingerprint(small_tree)
        entry_id = registry.register(fp).entry_id
        assert registry.find_resonant(fp) == entry_id
        assert registry.find_resonant(fingerprint(triangle_cycle)) is None

    def test_find_alternatives_sorted(self, registry, small_tree, diamond_dag, empty_graph):
        tree_id = registry.register(fingerprint(small_tree)).entry_id
        registry.register(fingerprint(diamond_dag))
        registry.register(fingerprint(empty_graph))

        alternatives = registry.find_alternatives(fingerprint(small_tree), threshold=0.0)
        assert alternatives[0] == (tree_id, 1.0)
        scores = [score for _, score in alternatives]
        assert scores == sorted(scores, reverse=True)

    def test_find_alternatives_threshold(self, registry, small_tree, empty_graph):
        registry.register(fingerprint(empty_graph))
        assert registry.find_alternatives(fingerprint(small_tree), threshold=0.99) == []

    def test_entries_snapshot(self, registry, small_tree):
        registry.register(fingerprint(small_tree))
        snapshot = registry.entries()
        snapshot.clear()
        assert len(registry) == 1


class TestConcurrency:
    def test_concurrent_registration_creates_one_entry(self, registry, small_tree):
        fp = fingerprint(small_tree)
        barrier = threading.Barrier(8)
        results = []
        results_lock = threading.Lock()

        def submit(i):
            barrier.wait()
            result = registry.register(fp, language=f"lang{i}")
            with results_lock:
                results.append(result)

        threads = [threading.Thread(target=submit, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(registry) == 1
        assert sum(1 for r in results if r.is_new) == 1
        entry = registry.entries()[0]
        assert entry.evolution_count == 7
        assert len(entry.manifestations) == 8
