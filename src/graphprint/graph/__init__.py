"""Program graphs and their topology."""

from .models import EdgeKind, ProgramEdge, ProgramGraph, ProgramNode, TopologyProfile
from .topology import analyze_topology

__all__ = [
    "EdgeKind",
    "ProgramEdge",
    "ProgramGraph",
    "ProgramNode",
    "TopologyProfile",
    "analyze_topology",
]
