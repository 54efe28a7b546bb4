"""Exceptions raised by graph operations."""

from __future__ import annotations

from typing import Any


class DAGError(Exception):
    """Base class for every error raised by this package."""


class VertexNilError(DAGError, ValueError):
    """A vertex of ``None`` was given where a real vertex is required."""

    def __init__(self) -> None:
        super().__init__("don't know what to do with 'None'")


class VertexDuplicateError(DAGError, ValueError):
    """The given vertex is already part of the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"'{vertex}' is already known")


class IDDuplicateError(DAGError, ValueError):
    """The given vertex id is already part of the graph."""

    def __init__(self, vertex_id: str) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"the id '{vertex_id}' is already known")


class IDEmptyError(DAGError, ValueError):
    """An empty string was given instead of a vertex id."""

    def __init__(self) -> None:
        super().__init__('don\'t know what to do with ""')


class IDUnknownError(DAGError, LookupError):
    """The given vertex id does not exist in the graph."""

    def __init__(self, vertex_id: str) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"'{vertex_id}' is unknown")


class _EdgeError(DAGError):
    """Common base for errors about an edge between two vertex ids."""

    _template = ""

    def __init__(self, src: str, dst: str) -> None:
        self.src = src
        self.dst = dst
        super().__init__(self._template.format(src=src, dst=dst))


class EdgeDuplicateError(_EdgeError, ValueError):
    """The edge already exists in the graph."""

    _template = "edge between '{src}' and '{dst}' is already known"


class EdgeUnknownError(_EdgeError, LookupError):
    """The edge does not exist in the graph."""

    _template = "edge between '{src}' and '{dst}' is unknown"


class EdgeLoopError(_EdgeError, ValueError):
    """Adding the edge would create a loop."""

    _template = "edge between '{src}' and '{dst}' would create a loop"


class SrcDstEqualError(_EdgeError, ValueError):
    """Source and destination of an edge are the same vertex."""

    _template = "src ('{src}') and dst ('{dst}') equal"