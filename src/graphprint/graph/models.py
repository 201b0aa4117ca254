"""Data models for program-structure graphs.

Ontology levels:
  Level 1: Syntactic units (ProgramNode) supplied by an external parser
  Level 2: Structural relations (edges): child, reference, data flow, control flow
  Level 3: Derived topology (TopologyProfile), read-only summary of a graph
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Sequence

from ..exceptions import InvalidGraphError

# ── Level 1-2: The program graph ───────────────────────────────────


class EdgeKind(Enum):
    """Structural relation carried by an edge."""

    CHILD = "child"
    REFERENCE = "reference"
    DATA_FLOW = "data_flow"
    CONTROL_FLOW = "control_flow"


@dataclass(frozen=True)
class ProgramNode:
    """A syntactic unit. ``kind`` is the parser's tag (e.g. "If", "Call", "+")."""

    kind: str
    payload: Optional[str] = None


@dataclass(frozen=True)
class ProgramEdge:
    source: int
    target: int
    kind: EdgeKind = EdgeKind.CHILD


class ProgramGraph:
    """Directed graph of typed nodes and typed edges.

    Nodes live in a flat list and are addressed by their dense index
    ``0..N-1``. Relationships are plain indices, so the graph owns everything
    and there are no back-pointers. Self-loops are allowed: they mark direct
    recursion. There are no removal operations.
    """

    def __init__(self) -> None:
        self._nodes: list[ProgramNode] = []
        self._edges: list[ProgramEdge] = []
        self._successors: list[list[int]] = []
        self._predecessors: list[list[int]] = []

    # ── construction ──

    def add_node(self, kind: str, payload: Optional[str] = None) -> int:
        """Append a node and return its id."""
        node_id = len(self._nodes)
        self._nodes.append(ProgramNode(kind=kind, payload=payload))
        self._successors.append([])
        self._predecessors.append([])
        return node_id

    def add_edge(self, source: int, target: int, kind: EdgeKind = EdgeKind.CHILD) -> None:
        """Add a directed edge ``source -> target``.

        Raises:
            InvalidGraphError: If either endpoint is not a node of this graph
        """
        for node_id in (source, target):
            if not 0 <= node_id < len(self._nodes):
                raise InvalidGraphError("edge references unknown node", node_id=node_id)

        self._edges.append(ProgramEdge(source=source, target=target, kind=kind))
        self._successors[source].append(target)
        self._predecessors[target].append(source)

    # ── queries ──

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def node(self, node_id: int) -> ProgramNode:
        return self._nodes[node_id]

    @property
    def nodes(self) -> Sequence[ProgramNode]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Sequence[ProgramEdge]:
        return tuple(self._edges)

    def neighbors(self, node_id: int) -> Iterator[int]:
        """Successors of ``node_id``, in insertion order (duplicates kept)."""
        return iter(self._successors[node_id])

    def predecessors(self, node_id: int) -> Iterator[int]:
        return iter(self._predecessors[node_id])

    def out_degree(self, node_id: int) -> int:
        return len(self._successors[node_id])

    def in_degree(self, node_id: int) -> int:
        return len(self._predecessors[node_id])

    def adjacency(self) -> list[list[int]]:
        """Copy of the successor lists, indexed by node id."""
        return [list(targets) for targets in self._successors]

    def has_edge(self, source: int, target: int) -> bool:
        return target in self._successors[source]

    # ── records ──

    def to_dict(self) -> dict[str, Any]:
        """Plain record: ``{"nodes": [{kind, payload}], "edges": [[src, tgt, kind]]}``."""
        return {
            "nodes": [{"kind": n.kind, "payload": n.payload} for n in self._nodes],
            "edges": [[e.source, e.target, e.kind.value] for e in self._edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProgramGraph:
        """Build a graph from the record produced by :meth:`to_dict`.

        Edge kinds may be omitted (defaults to child) or given by value.

        Raises:
            InvalidGraphError: If the record is malformed
        """
        if not isinstance(data, dict):
            raise InvalidGraphError(f"graph record must be a dict, got {type(data).__name__}")

        graph = cls()
        try:
            for node in data.get("nodes", []):
                graph.add_node(str(node["kind"]), node.get("payload"))
            for edge in data.get("edges", []):
                source, target = int(edge[0]), int(edge[1])
                kind = EdgeKind(edge[2]) if len(edge) > 2 else EdgeKind.CHILD
                graph.add_edge(source, target, kind)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise InvalidGraphError(f"malformed graph record: {e}")
        return graph

    def __repr__(self) -> str:
        return f"ProgramGraph(nodes={self.node_count()}, edges={self.edge_count()})"


# ── Level 3: Derived topology ──────────────────────────────────────


@dataclass(frozen=True)
class TopologyProfile:
    """Read-only topological summary of a ProgramGraph.

    Invariant: ``is_dag == not has_cycles``.
    """

    has_cycles: bool = False
    is_dag: bool = True
    scc_count: int = 0
    max_cycle_size: int = 0
    branching_factor: float = 0.0
    max_nesting_depth: int = 0
    connectivity_score: float = 0.0  # distinct arcs / (N*(N-1)), 0 when N < 2
    recursion_present: bool = False

    node_count: int = 0
    edge_count: int = 0
    cycle_count: int = 0  # multi-node SCCs; self-loops are counted in recursion_depth
    loop_complexity: int = 0  # total size of multi-node SCCs
    recursion_depth: int = 0  # single-node SCCs with a self-loop
    component_count: int = 0  # weakly connected components
    euler_characteristic: int = 0  # N - E
    diameter: int = 0  # same approximation as max_nesting_depth
    clustering_coefficient: float = 0.0
    modularity: float = 0.0
    betti_numbers: tuple[int, int] = (0, 0)
    signature: str = field(default="scc:[]-branch:0.00-depth:0")
