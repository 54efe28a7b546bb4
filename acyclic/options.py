"""Configuration of a graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional


def default_vertex_hash(v: Any) -> Hashable:
    """Use the vertex itself as its hash key.

    Raises ``TypeError`` when the vertex is not hashable; such vertices need
    a custom ``vertex_hash`` in the graph's options.
    """
    try:
        hash(v)
    except TypeError as exc:
        raise TypeError(
            f"vertex of type {type(v).__name__!r} is not hashable; "
            "set Options.vertex_hash to map it to a hashable key"
        ) from exc
    return v


@dataclass(frozen=True)
class Options:
    """Settings for a graph.

    ``vertex_hash`` maps a vertex to a hashable key identifying it. This is
    useful when vertices are not hashable themselves (dicts, lists). When it
    is ``None`` the vertex itself is used.
    """

    vertex_hash: Optional[Callable[[Any], Hashable]] = default_vertex_hash

    def hash_vertex(self, v: Any) -> Hashable:
        """Return the key under which the graph stores ``v``."""
        func = self.vertex_hash if self.vertex_hash is not None else default_vertex_hash
        return func(v)