"""Operation classification: node kind tag -> operation category.

The lookup table is plain immutable data built once at import time. A
classifier holds a reference to it plus its own running counts, so each
concurrent analysis must use its own classifier.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..graph.models import ProgramGraph, ProgramNode
from ..math.entropy import Entropy


class OperationCategory(Enum):
    """Closed taxonomy of operation types."""

    ARITHMETIC = "arithmetic"
    LOGICAL = "logical"
    BITWISE = "bitwise"
    COMPARISON = "comparison"
    ASSIGNMENT = "assignment"
    CONTROL_FLOW = "control_flow"
    LOOP = "loop"
    CONDITIONAL = "conditional"
    DATA_STRUCTURE = "data_structure"
    STRING_OP = "string_op"
    ARRAY_OP = "array_op"
    ASYNC = "async"
    FUNCTION_CALL = "function_call"
    LAMBDA = "lambda"
    TYPE_OPERATION = "type_operation"
    META_PROGRAMMING = "meta_programming"
    REFLECTION = "reflection"
    RECURSION = "recursion"
    SELF_REFERENCE = "self_reference"
    EMERGENCE = "emergence"  # reserved for pattern detectors; no tag maps here


# Kinds missing from the table fall back to this category. Lossy by
# construction: anything unknown is counted as an assignment.
DEFAULT_CATEGORY = OperationCategory.ASSIGNMENT

OperationSpectrum = Mapping[OperationCategory, float]

_C = OperationCategory

# Syntax-node tags
_NODE_KINDS = {
    "BinOp": _C.ARITHMETIC,
    "Binary": _C.ARITHMETIC,
    "UnOp": _C.ARITHMETIC,
    "Unary": _C.ARITHMETIC,
    "BoolOp": _C.LOGICAL,
    "Compare": _C.COMPARISON,
    "If": _C.CONDITIONAL,
    "Match": _C.CONDITIONAL,
    "Switch": _C.CONDITIONAL,
    "Ternary": _C.CONDITIONAL,
    "While": _C.LOOP,
    "For": _C.LOOP,
    "Loop": _C.LOOP,
    "Call": _C.FUNCTION_CALL,
    "MethodCall": _C.FUNCTION_CALL,
    "Closure": _C.LAMBDA,
    "Lambda": _C.LAMBDA,
    "Async": _C.ASYNC,
    "Await": _C.ASYNC,
    "Type": _C.TYPE_OPERATION,
    "TypeAlias": _C.TYPE_OPERATION,
    "Cast": _C.TYPE_OPERATION,
    "Macro": _C.META_PROGRAMMING,
    "Decorator": _C.META_PROGRAMMING,
    "Return": _C.CONTROL_FLOW,
    "Break": _C.CONTROL_FLOW,
    "Continue": _C.CONTROL_FLOW,
    "Throw": _C.CONTROL_FLOW,
    "Let": _C.ASSIGNMENT,
    "Const": _C.ASSIGNMENT,
    "Assign": _C.ASSIGNMENT,
    "Array": _C.ARRAY_OP,
    "Vec": _C.ARRAY_OP,
    "Index": _C.ARRAY_OP,
    "String": _C.STRING_OP,
    "Str": _C.STRING_OP,
    "Template": _C.STRING_OP,
    "Struct": _C.DATA_STRUCTURE,
    "Enum": _C.DATA_STRUCTURE,
    "Object": _C.DATA_STRUCTURE,
    "Class": _C.DATA_STRUCTURE,
    "Reflect": _C.REFLECTION,
    "TypeOf": _C.REFLECTION,
    "InstanceOf": _C.REFLECTION,
    "RecursiveCall": _C.RECURSION,
    "SelfRef": _C.SELF_REFERENCE,
    "This": _C.SELF_REFERENCE,
}

# Operator and keyword tokens
_TOKENS = {
    "+": _C.ARITHMETIC,
    "-": _C.ARITHMETIC,
    "*": _C.ARITHMETIC,
    "/": _C.ARITHMETIC,
    "%": _C.ARITHMETIC,
    "**": _C.ARITHMETIC,
    "&&": _C.LOGICAL,
    "||": _C.LOGICAL,
    "!": _C.LOGICAL,
    "&": _C.BITWISE,
    "|": _C.BITWISE,
    "^": _C.BITWISE,
    "~": _C.BITWISE,
    "<<": _C.BITWISE,
    ">>": _C.BITWISE,
    "==": _C.COMPARISON,
    "!=": _C.COMPARISON,
    "<": _C.COMPARISON,
    ">": _C.COMPARISON,
    "<=": _C.COMPARISON,
    ">=": _C.COMPARISON,
    "=": _C.ASSIGNMENT,
    "+=": _C.ASSIGNMENT,
    "-=": _C.ASSIGNMENT,
    "*=": _C.ASSIGNMENT,
    "/=": _C.ASSIGNMENT,
    "if": _C.CONDITIONAL,
    "else": _C.CONDITIONAL,
    "match": _C.CONDITIONAL,
    "for": _C.LOOP,
    "while": _C.LOOP,
    "loop": _C.LOOP,
    "break": _C.CONTROL_FLOW,
    "continue": _C.CONTROL_FLOW,
    "return": _C.CONTROL_FLOW,
    "async": _C.ASYNC,
    "await": _C.ASYNC,
    "spawn": _C.ASYNC,
    "fn": _C.FUNCTION_CALL,
    "closure": _C.LAMBDA,
    "move": _C.LAMBDA,
    "type": _C.TYPE_OPERATION,
    "impl": _C.TYPE_OPERATION,
    "trait": _C.TYPE_OPERATION,
    "as": _C.TYPE_OPERATION,
    "macro": _C.META_PROGRAMMING,
    "derive": _C.META_PROGRAMMING,
    "attribute": _C.META_PROGRAMMING,
    "typeof": _C.REFLECTION,
    "instanceof": _C.REFLECTION,
    "self": _C.SELF_REFERENCE,
    "this": _C.SELF_REFERENCE,
}

OPERATION_TABLE: Mapping[str, OperationCategory] = MappingProxyType({**_TOKENS, **_NODE_KINDS})


class OperationClassifier:
    """Accumulates operation categories over the nodes it classifies.

    Not thread-safe. ``reset()`` allows reuse across graphs, one at a time.
    """

    def __init__(self, table: Mapping[str, OperationCategory] = OPERATION_TABLE):
        self._table = table
        self._counts: Counter[OperationCategory] = Counter()

    def classify_kind(self, kind: str) -> OperationCategory:
        """Classify a raw kind tag and count it."""
        category = self._table.get(kind, DEFAULT_CATEGORY)
        self._counts[category] += 1
        return category

    def classify(self, node: ProgramNode) -> OperationCategory:
        return self.classify_kind(node.kind)

    def classify_graph(self, graph: ProgramGraph) -> None:
        """Classify every node of ``graph`` in id order."""
        for node in graph.nodes:
            self.classify(node)

    def counts(self) -> dict[OperationCategory, int]:
        return dict(self._counts)

    def total(self) -> int:
        return sum(self._counts.values())

    def frequency_spectrum(self) -> OperationSpectrum:
        """Counts normalized to sum to 1, in taxonomy order; empty if nothing was classified."""
        total = self.total()
        if total == 0:
            return MappingProxyType({})
        return MappingProxyType(
            {
                category: self._counts[category] / total
                for category in OperationCategory
                if self._counts[category] > 0
            }
        )

    def harmonic_complexity(self) -> float:
        """Diversity of the observed categories in [0, 1].

        Shannon entropy of the counts over the full taxonomy size, so more
        distinct and more evenly spread categories score higher. Zero when
        fewer than two categories were seen. Informational only.
        """
        return Entropy.normalized(self._counts, alphabet_size=len(OperationCategory))

    def dominant_category(self) -> Optional[OperationCategory]:
        """Most frequent category; ties go to the earlier taxonomy entry."""
        if not self._counts:
            return None
        return max(OperationCategory, key=lambda c: (self._counts[c], -_ORDER[c]))

    def reset(self) -> None:
        self._counts.clear()


_ORDER = {category: i for i, category in enumerate(OperationCategory)}
