"""Fingerprint registry: deduplicate fingerprints across sources and languages.

A candidate that resonates with an already-registered fingerprint is
recorded as another manifestation of that entry. Otherwise it opens a new
entry. The lookup and the insert happen under one lock, so concurrent
submissions of the same structure cannot both create entries.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, replace
from typing import Optional

from ..config import DEFAULT_CONFIG, FingerprintConfig
from ..logging_config import get_logger
from .comparator import resonates, similarity
from .models import Fingerprint

logger = get_logger(__name__)


@dataclass(frozen=True)
class Manifestation:
    """One registered occurrence of a structure."""

    language: str
    source_id: str
    fingerprint: Fingerprint
    registered_at: float


@dataclass(frozen=True)
class RegistryEntry:
    """A distinct structure and every manifestation seen for it.

    ``fingerprint`` is the one that opened the entry.
    """

    entry_id: str
    fingerprint: Fingerprint
    manifestations: tuple[Manifestation, ...]
    evolution_count: int
    created_at: float

    @property
    def languages(self) -> list[str]:
        return sorted({m.language for m in self.manifestations})


@dataclass(frozen=True)
class Registration:
    """Outcome of :meth:`FingerprintRegistry.register`."""

    entry_id: str
    is_new: bool


class FingerprintRegistry:
    """Thread-safe map of entry id -> RegistryEntry."""

    def __init__(self, config: Optional[FingerprintConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._lock = threading.RLock()
        self._entries: dict[str, RegistryEntry] = {}

    def register(
        self, fingerprint: Fingerprint, language: str = "unknown", source_id: str = ""
    ) -> Registration:
        """Record ``fingerprint``, merging it into a resonant entry if one exists."""
        now = time.time()
        manifestation = Manifestation(
            language=language,
            source_id=source_id,
            fingerprint=fingerprint,
            registered_at=now,
        )

        with self._lock:
            entry_id = self._find_resonant_locked(fingerprint)
            if entry_id is not None:
                entry = self._entries[entry_id]
                self._entries[entry_id] = replace(
                    entry,
                    manifestations=entry.manifestations + (manifestation,),
                    evolution_count=entry.evolution_count + 1,
                )
                logger.debug(f"{fingerprint.short_hash} ({language}) joins {entry_id}")
                return Registration(entry_id=entry_id, is_new=False)

            entry_id = self._new_id_locked(fingerprint)
            self._entries[entry_id] = RegistryEntry(
                entry_id=entry_id,
                fingerprint=fingerprint,
                manifestations=(manifestation,),
                evolution_count=0,
                created_at=now,
            )

        logger.info(f"Registered new structure {entry_id} ({language})")
        return Registration(entry_id=entry_id, is_new=True)

    def find_resonant(self, fingerprint: Fingerprint) -> Optional[str]:
        """Id of the first entry (in registration order) that resonates, if any."""
        with self._lock:
            return self._find_resonant_locked(fingerprint)

    def find_alternatives(
        self, fingerprint: Fingerprint, threshold: float = 0.5
    ) -> list[tuple[str, float]]:
        """Entries whose fingerprint similarity exceeds ``threshold``, best first."""
        with self._lock:
            entries = list(self._entries.values())

        scored = [(entry.entry_id, similarity(fingerprint, entry.fingerprint)) for entry in entries]
        matches = [(entry_id, score) for entry_id, score in scored if score > threshold]
        return sorted(matches, key=lambda item: (-item[1], item[0]))

    def get(self, entry_id: str) -> Optional[RegistryEntry]:
        with self._lock:
            return self._entries.get(entry_id)

    def entries(self) -> list[RegistryEntry]:
        """Snapshot of all entries in registration order."""
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        with self._lock:
            return entry_id in self._entries

    # ── internals (caller holds the lock) ──

    def _find_resonant_locked(self, fingerprint: Fingerprint) -> Optional[str]:
        for entry_id, entry in self._entries.items():
            for manifestation in entry.manifestations:
                if resonates(fingerprint, manifestation.fingerprint, self.config):
                    return entry_id
        return None

    def _new_id_locked(self, fingerprint: Fingerprint) -> str:
        base = f"fp:{fingerprint.short_hash}"
        entry_id = base
        suffix = 2
        while entry_id in self._entries:
            entry_id = f"{base}-{suffix}"
            suffix += 1
        return entry_id
