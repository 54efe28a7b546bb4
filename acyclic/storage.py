"""Serialisable representations of vertices, edges and whole graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class StorableVertex:
    """A vertex together with its id, stored under the short keys ``i`` and ``v``."""

    id: str
    value: Any

    def to_dict(self) -> dict:
        """Return the JSON-ready form of this vertex."""
        return {"i": self.id, "v": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StorableVertex":
        """Build a vertex from its JSON-ready form; missing fields take empty values."""
        data = _require_mapping(data, "vertex")
        return cls(id=_require_str(data.get("i", ""), "i"), value=data.get("v"))


@dataclass(frozen=True)
class StorableEdge:
    """An edge between two vertex ids, stored under the short keys ``s`` and ``d``."""

    src_id: str
    dst_id: str

    def to_dict(self) -> dict:
        """Return the JSON-ready form of this edge."""
        return {"s": self.src_id, "d": self.dst_id}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StorableEdge":
        """Build an edge from its JSON-ready form; missing fields take empty values."""
        data = _require_mapping(data, "edge")
        return cls(
            src_id=_require_str(data.get("s", ""), "s"),
            dst_id=_require_str(data.get("d", ""), "d"),
        )


@dataclass
class StorableDAG:
    """All vertices and edges of a graph, stored under ``vs`` and ``es``."""

    vertices: List[StorableVertex] = field(default_factory=list)
    edges: List[StorableEdge] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready form of the graph."""
        return {
            "vs": [v.to_dict() for v in self.vertices],
            "es": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StorableDAG":
        """Build a graph description from its JSON-ready form."""
        data = _require_mapping(data, "graph")
        raw_vertices = data.get("vs") or []
        raw_edges = data.get("es") or []
        if not isinstance(raw_vertices, list):
            raise TypeError("field 'vs' must be a list")
        if not isinstance(raw_edges, list):
            raise TypeError("field 'es' must be a list")
        return cls(
            vertices=[StorableVertex.from_dict(v) for v in raw_vertices],
            edges=[StorableEdge.from_dict(e) for e in raw_edges],
        )