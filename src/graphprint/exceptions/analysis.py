"""Analysis-related exceptions: graph shape, signature mismatch, size bounds."""

from typing import Optional

from .base import GraphprintError


class AnalysisError(GraphprintError):
    """Base class for analysis-related errors."""
    pass


class StructuralPreconditionError(AnalysisError):
    """Raised when two signatures of different length are compared."""

    def __init__(self, left_length: int, right_length: int):
        super().__init__(
            "Cannot compare signatures of different length",
            details={"left": str(left_length), "right": str(right_length)},
        )
        self.left_length = left_length
        self.right_length = right_length


class InvalidGraphError(AnalysisError):
    """Raised when a program graph is malformed."""

    def __init__(self, reason: str, node_id: Optional[int] = None):
        details = {"reason": reason}
        if node_id is not None:
            details["node_id"] = str(node_id)

        super().__init__(f"Invalid program graph: {reason}", details=details)
        self.reason = reason
        self.node_id = node_id


class GraphTooLargeError(AnalysisError):
    """Raised when a graph exceeds the configured node bound."""

    def __init__(self, node_count: int, max_nodes: int):
        super().__init__(
            f"Graph has {node_count} nodes, limit is {max_nodes}",
            details={"node_count": str(node_count), "max_nodes": str(max_nodes)},
        )
        self.node_count = node_count
        self.max_nodes = max_nodes


class InvalidRecordError(AnalysisError):
    """Raised when a serialized fingerprint record cannot be decoded."""

    def __init__(self, field_name: str, reason: str):
        super().__init__(
            f"Invalid fingerprint record field: {field_name}",
            details={"field": field_name, "reason": reason},
        )
        self.field_name = field_name
        self.reason = reason
