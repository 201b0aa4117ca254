"""Information theory: Shannon entropy and normalized diversity."""

import math
from collections.abc import Hashable, Mapping
from typing import Union


class Entropy:
    """Information entropy calculations."""

    @staticmethod
    def shannon(distribution: Mapping[Hashable, Union[int, float]]) -> float:
        """
        Compute Shannon entropy H(X) = -Σ p(x) log₂ p(x).

        Args:
            distribution: Dictionary with event -> count mapping

        Returns:
            Entropy in bits
        """
        total = sum(distribution.values())
        if total == 0:
            return 0.0

        entropy = 0.0
        for count in distribution.values():
            p = count / total
            if p > 0:
                entropy -= p * math.log2(p)

        return entropy

    @staticmethod
    def normalized(
        distribution: Mapping[Hashable, Union[int, float]], alphabet_size: int = 0
    ) -> float:
        """
        Normalize entropy by the maximum possible entropy.

        H_norm = H / log₂(N). N is ``alphabet_size`` when given, else the
        number of observed events. Dividing by a fixed alphabet makes the
        score grow with both the number of distinct events and their evenness.

        Returns:
            Normalized entropy in [0, 1]
        """
        observed = sum(1 for count in distribution.values() if count > 0)
        if observed <= 1:
            return 0.0

        n = max(alphabet_size, observed)
        max_h = math.log2(n)
        return Entropy.shannon(distribution) / max_h if max_h > 0 else 0.0
