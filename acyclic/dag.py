"""A directed acyclic graph whose vertices are addressed by string ids."""

from __future__ import annotations

import threading
import uuid
from typing import Any, Dict, Hashable, Iterable, Optional, Set

from .errors import (
    EdgeDuplicateError,
    EdgeLoopError,
    EdgeUnknownError,
    IDDuplicateError,
    IDEmptyError,
    IDUnknownError,
    SrcDstEqualError,
    VertexDuplicateError,
    VertexNilError,
)
from .options import Options

_Edges = Dict[Hashable, Dict[Hashable, None]]


def _explicit_id(vertex: Any) -> Optional[str]:
    """Return the id a vertex declares for itself, if any.

    A vertex declares its id through an ``id`` attribute that is either a
    string or a method returning one.
    """
    declared = getattr(vertex, "id", None)
    if callable(declared):
        declared = declared()
    return declared if isinstance(declared, str) else None


class DAG:
    """A directed acyclic graph.

    Every vertex has a unique string id. Ancestor and descendant sets are
    cached and kept consistent as the graph changes.
    """

    def __init__(self, options: Optional[Options] = None) -> None:
        self._options = options if options is not None else Options()
        self._lock = threading.RLock()
        self._vertices: Dict[Hashable, str] = {}
        self._vertex_ids: Dict[str, Any] = {}
        self._inbound: _Edges = {}
        self._outbound: _Edges = {}
        self._ancestors_cache: Dict[Hashable, Set[Hashable]] = {}
        self._descendants_cache: Dict[Hashable, Set[Hashable]] = {}

    @property
    def options(self) -> Options:
        """The options this graph was created with."""
        return self._options

    # ------------------------------------------------------------------
    # vertices

    def add_vertex(self, vertex: Any) -> str:
        """Add ``vertex`` and return its id.

        The id is taken from the vertex when it declares one, otherwise a
        random one is generated.
        """
        with self._lock:
            vertex_id = _explicit_id(vertex) if vertex is not None else None
            if vertex_id is None:
                vertex_id = str(uuid.uuid4())
            self._add_vertex_by_id(vertex_id, vertex)
            return vertex_id

    def add_vertex_by_id(self, vertex_id: str, vertex: Any) -> None:
        """Add ``vertex`` under the given id."""
        with self._lock:
            self._add_vertex_by_id(vertex_id, vertex)

    def _add_vertex_by_id(self, vertex_id: str, vertex: Any) -> None:
        if vertex is None:
            raise VertexNilError()
        key = self._options.hash_vertex(vertex)
        if key in self._vertices:
            raise VertexDuplicateError(vertex)
        if vertex_id in self._vertex_ids:
            raise IDDuplicateError(vertex_id)
        self._vertices[key] = vertex_id
        self._vertex_ids[vertex_id] = vertex

    def get_vertex(self, vertex_id: str) -> Any:
        """Return the vertex with the given id."""
        with self._lock:
            self._check_id(vertex_id)
            return self._vertex_ids[vertex_id]

    def delete_vertex(self, vertex_id: str) -> None:
        """Delete the vertex with the given id and all its edges."""
        with self._lock:
            key = self._key_of(vertex_id)
            descendants = set(self._descendants(key))
            ancestors = set(self._ancestors(key))

            for parent in self._inbound.pop(key, {}):
                self._outbound[parent].pop(key, None)
            for child in self._outbound.pop(key, {}):
                self._inbound[child].pop(key, None)

            self._drop_cached(self._ancestors_cache, descendants, key)
            self._drop_cached(self._descendants_cache, ancestors, key)

            del self._vertices[key]
            del self._vertex_ids[vertex_id]

    # ------------------------------------------------------------------
    # edges

    def add_edge(self, src_id: str, dst_id: str) -> None:
        """Add an edge from ``src_id`` to ``dst_id``."""
        with self._lock:
            src, dst = self._edge_keys(src_id, dst_id)
            if self._is_edge(src, dst):
                raise EdgeDuplicateError(src_id, dst_id)

            descendants = set(self._descendants(dst))
            ancestors = set(self._ancestors(src))
            if src in descendants:
                raise EdgeLoopError(src_id, dst_id)

            self._outbound.setdefault(src, {})[dst] = None
            self._inbound.setdefault(dst, {})[src] = None

            self._drop_cached(self._ancestors_cache, descendants, dst)
            self._drop_cached(self._descendants_cache, ancestors, src)

    def is_edge(self, src_id: str, dst_id: str) -> bool:
        """Return whether there is an edge from ``src_id`` to ``dst_id``."""
        with self._lock:
            src, dst = self._edge_keys(src_id, dst_id)
            return self._is_edge(src, dst)

    def delete_edge(self, src_id: str, dst_id: str) -> None:
        """Delete the edge from ``src_id`` to ``dst_id``."""
        with self._lock:
            src, dst = self._edge_keys(src_id, dst_id)
            if not self._is_edge(src, dst):
                raise EdgeUnknownError(src_id, dst_id)

            descendants = set(self._descendants(src))
            ancestors = set(self._ancestors(dst))

            del self._outbound[src][dst]
            del self._inbound[dst][src]

            self._drop_cached(self._ancestors_cache, descendants, src)
            self._drop_cached(self._descendants_cache, ancestors, dst)

    def _is_edge(self, src: Hashable, dst: Hashable) -> bool:
        return dst in self._outbound.get(src, {}) and src in self._inbound.get(dst, {})

    def _edge_keys(self, src_id: str, dst_id: str) -> tuple:
        src = self._key_of(src_id)
        dst = self._key_of(dst_id)
        if src_id == dst_id:
            raise SrcDstEqualError(src_id, dst_id)
        return src, dst

    # ------------------------------------------------------------------
    # queries

    def order(self) -> int:
        """Return the number of vertices."""
        with self._lock:
            return len(self._vertices)

    def size(self) -> int:
        """Return the number of edges."""
        with self._lock:
            return sum(len(children) for children in self._outbound.values())

    def __len__(self) -> int:
        return self.order()

    def __contains__(self, vertex_id: object) -> bool:
        with self._lock:
            return vertex_id in self._vertex_ids

    def get_leaves(self) -> Dict[str, Any]:
        """Return all vertices without children, keyed by id."""
        with self._lock:
            return {
                vid: self._vertex_ids[vid]
                for key, vid in self._vertices.items()
                if not self._outbound.get(key)
            }

    def is_leaf(self, vertex_id: str) -> bool:
        """Return whether the vertex has no children."""
        with self._lock:
            return not self._outbound.get(self._key_of(vertex_id))

    def get_roots(self) -> Dict[str, Any]:
        """Return all vertices without parents, keyed by id."""
        with self._lock:
            return {
                vid: self._vertex_ids[vid]
                for key, vid in self._vertices.items()
                if not self._inbound.get(key)
            }

    def is_root(self, vertex_id: str) -> bool:
        """Return whether the vertex has no parents."""
        with self._lock:
            return not self._inbound.get(self._key_of(vertex_id))

    def get_vertices(self) -> Dict[str, Any]:
        """Return all vertices, keyed by id."""
        with self._lock:
            return dict(self._vertex_ids)

    def get_parents(self, vertex_id: str) -> Dict[str, Any]:
        """Return the direct parents of the vertex, keyed by id."""
        with self._lock:
            return self._by_id(self._inbound.get(self._key_of(vertex_id), {}))

    def get_children(self, vertex_id: str) -> Dict[str, Any]:
        """Return the direct children of the vertex, keyed by id."""
        with self._lock:
            return self._by_id(self._outbound.get(self._key_of(vertex_id), {}))

    def get_ancestors(self, vertex_id: str) -> Dict[str, Any]:
        """Return all ancestors of the vertex, keyed by id."""
        with self._lock:
            return self._by_id(self._ancestors(self._key_of(vertex_id)))

    def get_descendants(self, vertex_id: str) -> Dict[str, Any]:
        """Return all descendants of the vertex, keyed by id."""
        with self._lock:
            return self._by_id(self._descendants(self._key_of(vertex_id)))

    # ------------------------------------------------------------------
    # maintenance

    def reduce_transitively(self) -> None:
        """Remove every edge that is implied by a longer path."""
        with self._lock:
            for key in self._vertices:
                self._descendants(key)

            changed = False
            for key in self._vertices:
                children = self._outbound.get(key)
                if not children:
                    continue
                reachable: Set[Hashable] = set()
                for child in children:
                    reachable |= self._descendants_cache[child]
                for child in [c for c in children if c in reachable]:
                    del children[child]
                    del self._inbound[child][key]
                    changed = True

            if changed:
                self._flush_caches()

    def flush_caches(self) -> None:
        """Drop all cached ancestor and descendant sets."""
        with self._lock:
            self._flush_caches()

    def _flush_caches(self) -> None:
        self._ancestors_cache = {}
        self._descendants_cache = {}

    def __str__(self) -> str:
        with self._lock:
            lines = [
                f"DAG Vertices: {self.order()} - Edges: {self.size()}",
                "Vertices:",
            ]
            lines.extend(f"  {key}" for key in self._vertices)
            lines.append("Edges:")
            lines.extend(
                f"  {src} -> {dst}"
                for src, children in self._outbound.items()
                for dst in children
            )
            return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # internals

    def _check_id(self, vertex_id: str) -> None:
        if vertex_id == "":
            raise IDEmptyError()
        if vertex_id not in self._vertex_ids:
            raise IDUnknownError(vertex_id)

    def _key_of(self, vertex_id: str) -> Hashable:
        self._check_id(vertex_id)
        return self._options.hash_vertex(self._vertex_ids[vertex_id])

    def _by_id(self, keys: Iterable[Hashable]) -> Dict[str, Any]:
        result = {}
        for key in keys:
            vid = self._vertices[key]
            result[vid] = self._vertex_ids[vid]
        return result

    @staticmethod
    def _drop_cached(
        cache: Dict[Hashable, Set[Hashable]], keys: Iterable[Hashable], key: Hashable
    ) -> None:
        for k in keys:
            cache.pop(k, None)
        cache.pop(key, None)

    def _ancestors(self, key: Hashable) -> Set[Hashable]:
        return self._closure(key, self._inbound, self._ancestors_cache)

    def _descendants(self, key: Hashable) -> Set[Hashable]:
        return self._closure(key, self._outbound, self._descendants_cache)

    @staticmethod
    def _closure(
        key: Hashable, edges: _Edges, cache: Dict[Hashable, Set[Hashable]]
    ) -> Set[Hashable]:
        """Return all vertices reachable from ``key`` along ``edges``, caching results."""
        stack = [key]
        while stack:
            node = stack[-1]
            if node in cache:
                stack.pop()
                continue
            neighbours = edges.get(node, {})
            pending = [n for n in neighbours if n not in cache]
            if pending:
                stack.extend(pending)
                continue
            reached: Set[Hashable] = set()
            for n in neighbours:
                reached |= cache[n]
                reached.add(n)
            cache[node] = reached
            stack.pop()
        return cache[key]