"""
graphprint - Structural Code Fingerprints

Spectral and topological fingerprints of program graphs. A fingerprint
captures a program's shape (cycles, nesting, connectivity), its control-flow
complexity and its mix of operations, so two programs can be compared for
structural equivalence regardless of naming or surface syntax.
"""

__version__ = "0.1.0"

from .api import compare, equivalent, fingerprint, fingerprint_many
from .config import FingerprintConfig, load_config
from .fingerprint import Fingerprint, FingerprintRegistry
from .graph import EdgeKind, ProgramGraph

__all__ = [
    "fingerprint",  # Main entry point
    "fingerprint_many",
    "compare",
    "equivalent",
    "Fingerprint",
    "FingerprintConfig",
    "FingerprintRegistry",
    "EdgeKind",
    "ProgramGraph",
    "load_config",
]
