"""Exception hierarchy for graphprint."""

from .analysis import (
    AnalysisError,
    GraphTooLargeError,
    InvalidGraphError,
    InvalidRecordError,
    StructuralPreconditionError,
)
from .base import GraphprintError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "GraphprintError",
    "AnalysisError",
    "StructuralPreconditionError",
    "InvalidGraphError",
    "GraphTooLargeError",
    "InvalidRecordError",
    "ConfigurationError",
    "InvalidConfigError",
]
