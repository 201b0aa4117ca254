"""Flat-record serialization of fingerprints.

The record keeps the Fingerprint field set in a stable order, with enums
rendered by value so it can go straight to JSON or a database row.
"""

from __future__ import annotations

from dataclasses import asdict, fields
from types import MappingProxyType
from typing import Any, Mapping

from ..exceptions import InvalidRecordError
from ..graph.models import TopologyProfile
from ..semantics.models import PatternMatch, SemanticProfile
from ..semantics.operations import OperationCategory
from .models import Fingerprint

RECORD_FIELDS = (
    "signature",
    "topology",
    "semantics",
    "operations",
    "resonance",
    "coherence",
    "evolution_score",
    "content_hash",
)


def _spectrum_to_record(spectrum) -> dict[str, float]:
    return {category.value: spectrum[category] for category in OperationCategory if category in spectrum}


def _spectrum_from_record(data: Mapping[str, Any]) -> MappingProxyType:
    try:
        parsed = {OperationCategory(key): float(value) for key, value in data.items()}
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidRecordError("operations", str(e))
    return MappingProxyType({c: parsed[c] for c in OperationCategory if c in parsed})


def _topology_from_record(data: Mapping[str, Any]) -> TopologyProfile:
    if not isinstance(data, Mapping):
        raise InvalidRecordError("topology", f"expected a mapping, got {type(data).__name__}")

    topology_data = dict(data)
    unknown = set(topology_data) - {f.name for f in fields(TopologyProfile)}
    if unknown:
        raise InvalidRecordError("topology", f"unknown keys: {sorted(unknown)}")

    try:
        if "betti_numbers" in topology_data:
            topology_data["betti_numbers"] = tuple(topology_data["betti_numbers"])
        return TopologyProfile(**topology_data)
    except (TypeError, ValueError) as e:
        raise InvalidRecordError("topology", str(e))


def _semantics_from_record(data: Mapping[str, Any], operations) -> SemanticProfile:
    try:
        return SemanticProfile(
            cyclomatic=int(data["cyclomatic"]),
            cognitive=int(data["cognitive"]),
            dependency_depth=int(data["dependency_depth"]),
            pattern_count=int(data["pattern_count"]),
            patterns=tuple(PatternMatch(**p) for p in data.get("patterns", [])),
            operations=operations,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise InvalidRecordError("semantics", str(e))


def _float_field(record: Mapping[str, Any], name: str) -> float:
    try:
        return float(record[name])
    except (TypeError, ValueError) as e:
        raise InvalidRecordError(name, str(e))


def fingerprint_to_record(fp: Fingerprint) -> dict[str, Any]:
    """Fingerprint -> plain dict with keys in RECORD_FIELDS order."""
    topology = asdict(fp.topology)
    topology["betti_numbers"] = list(fp.topology.betti_numbers)

    semantics = {
        "cyclomatic": fp.semantics.cyclomatic,
        "cognitive": fp.semantics.cognitive,
        "dependency_depth": fp.semantics.dependency_depth,
        "pattern_count": fp.semantics.pattern_count,
        "patterns": [asdict(p) for p in fp.semantics.patterns],
    }

    return {
        "signature": list(fp.signature),
        "topology": topology,
        "semantics": semantics,
        "operations": _spectrum_to_record(fp.operations),
        "resonance": fp.resonance,
        "coherence": fp.coherence,
        "evolution_score": fp.evolution_score,
        "content_hash": fp.content_hash,
    }


def fingerprint_from_record(record: Mapping[str, Any]) -> Fingerprint:
    """Inverse of :func:`fingerprint_to_record`.

    Raises:
        InvalidRecordError: If a field is missing or malformed; ``field_name``
            names the offending field
    """
    if not isinstance(record, Mapping):
        raise InvalidRecordError("record", f"expected a mapping, got {type(record).__name__}")
    for name in RECORD_FIELDS:
        if name not in record:
            raise InvalidRecordError(name, "missing")

    try:
        signature = tuple(float(v) for v in record["signature"])
    except (TypeError, ValueError) as e:
        raise InvalidRecordError("signature", str(e))

    content_hash = record["content_hash"]
    if not isinstance(content_hash, str):
        raise InvalidRecordError("content_hash", f"expected a string, got {type(content_hash).__name__}")

    operations = _spectrum_from_record(record["operations"])
    topology = _topology_from_record(record["topology"])
    semantics = _semantics_from_record(record["semantics"], operations)

    return Fingerprint(
        signature=signature,
        topology=topology,
        semantics=semantics,
        operations=operations,
        resonance=_float_field(record, "resonance"),
        coherence=_float_field(record, "coherence"),
        evolution_score=_float_field(record, "evolution_score"),
        content_hash=content_hash,
    )
