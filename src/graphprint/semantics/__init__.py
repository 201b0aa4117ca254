"""Semantic analysis: operation taxonomy, complexity, patterns."""

from .analyzer import SemanticAnalyzer, cyclomatic_complexity
from .models import PatternMatch, SemanticProfile
from .operations import (
    DEFAULT_CATEGORY,
    OPERATION_TABLE,
    OperationCategory,
    OperationClassifier,
    OperationSpectrum,
)
from .patterns import NullPatternDetector, PatternDetector

__all__ = [
    "DEFAULT_CATEGORY",
    "OPERATION_TABLE",
    "NullPatternDetector",
    "OperationCategory",
    "OperationClassifier",
    "OperationSpectrum",
    "PatternDetector",
    "PatternMatch",
    "SemanticAnalyzer",
    "SemanticProfile",
    "cyclomatic_complexity",
]
