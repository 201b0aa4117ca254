"""Tests for math/entropy.py."""

import math

import pytest

from graphprint.math.entropy import Entropy


class TestShannon:
    def test_fair_coin(self):
        assert Entropy.shannon({"heads": 50, "tails": 50}) == pytest.approx(1.0)

    def test_uniform_four(self):
        assert Entropy.shannon({"a": 1, "b": 1, "c": 1, "d": 1}) == pytest.approx(2.0)

    def test_single_event(self):
        assert Entropy.shannon({"a": 100}) == 0.0

    def test_empty(self):
        assert Entropy.shannon({}) == 0.0

    def test_zero_counts_ignored(self):
        assert Entropy.shannon({"a": 5, "b": 5, "c": 0}) == pytest.approx(1.0)


class TestNormalized:
    def test_uniform_is_one(self):
        assert Entropy.normalized({"a": 3, "b": 3, "c": 3}) == pytest.approx(1.0)

    def test_fewer_than_two_events(self):
        assert Entropy.normalized({"a": 10}) == 0.0
        assert Entropy.normalized({}) == 0.0

    def test_fixed_alphabet(self):
        value = Entropy.normalized({"a": 1, "b": 1}, alphabet_size=4)
        assert value == pytest.approx(0.5)

    def test_alphabet_smaller_than_observed(self):
        value = Entropy.normalized({"a": 1, "b": 1, "c": 1, "d": 1}, alphabet_size=2)
        assert value == pytest.approx(1.0)

    def test_skewed_below_one(self):
        value = Entropy.normalized({"a": 97, "b": 1, "c": 1, "d": 1})
        assert 0.0 < value < 1.0
        assert value == pytest.approx(Entropy.shannon({"a": 97, "b": 1, "c": 1, "d": 1}) / math.log2(4))
