"""RustworkxGraph — rustworkx-backed in-memory graph store implementing the Graph interface."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import rustworkx

from wend.exceptions import ElementNotFoundError, GraphSealedError, InvalidArgumentError
from wend.graph.protocols import Edge, Graph, Vertex
from wend.graph.types import kind as kind_of
from wend.graph.types import prepare_labels

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterable, Iterator

logger = logging.getLogger(__name__)


class RustworkxGraph(Graph):
    """Directed, labeled multigraph over arbitrary hashable vertex ids.

    Wraps a ``rustworkx.PyDiGraph``.  Vertices carry an id and an optional
    document; edges carry a label and an optional document.  Parallel edges
    are allowed.

    Build with ``add_*`` then call :meth:`seal` before handing the graph to
    readers.  A sealed graph rejects mutation and can be traversed by any
    number of independent readers.
    """

    __slots__ = ("_graph", "_id_to_idx", "_sealed")

    def __init__(self) -> None:
        self._graph: rustworkx.PyDiGraph = rustworkx.PyDiGraph(multigraph=True)
        self._id_to_idx: dict[Hashable, int] = {}
        self._sealed = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: Hashable, document: Any = None) -> RxVertex:
        """Add a vertex, or replace the document of an existing one.

        Passing ``document=None`` for an existing vertex leaves its document alone.
        """
        self._require_mutable()
        idx = self._id_to_idx.get(vertex_id)
        if idx is None:
            idx = self._graph.add_node({"id": vertex_id, "document": document})
            self._id_to_idx[vertex_id] = idx
        elif document is not None:
            self._graph[idx]["document"] = document
        return RxVertex(self, idx)

    def add_vertices(self, pairs: Iterable[tuple[Hashable, Any]]) -> RustworkxGraph:
        """Add ``(vertex_id, document)`` pairs.  Returns ``self`` for chaining."""
        for vertex_id, document in pairs:
            self.add_vertex(vertex_id, document)
        return self

    def set_document(self, vertex_id: Hashable, document: Any) -> None:
        """Replace the document attached to *vertex_id*."""
        self._require_mutable()
        idx = self._require_vertex(vertex_id)
        self._graph[idx]["document"] = document

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        label: str,
        document: Any = None,
    ) -> RxEdge:
        """Add a directed edge, auto-creating missing endpoints.

        The returned edge has no recorded traversal direction.
        """
        self._require_mutable()
        src_idx = self.add_vertex(source)._index
        tgt_idx = self.add_vertex(target)._index
        data: dict[str, Any] = {"label": label, "document": document}
        edge_idx = self._graph.add_edge(src_idx, tgt_idx, data)
        data["index"] = edge_idx
        return RxEdge(self, edge_idx, src_idx, tgt_idx)

    def add_edges(self, label: str, edges: Iterable[tuple[Any, ...]]) -> RustworkxGraph:
        """Add many edges sharing *label*.

        Each entry is ``(source, target)`` or ``(source, target, document)``.
        Returns ``self`` for chaining.
        """
        for entry in edges:
            if len(entry) == 2:
                source, target = entry
                document = None
            elif len(entry) == 3:
                source, target, document = entry
            else:
                msg = f"Edge entries must have 2 or 3 items, got {entry!r}"
                raise InvalidArgumentError(msg)
            self.add_edge(source, target, label, document)
        return self

    def seal(self) -> RustworkxGraph:
        """Publish the graph for reading.  Idempotent; returns ``self``."""
        if not self._sealed:
            self._sealed = True
            logger.debug("Sealed %r", self)
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Graph interface
    # ------------------------------------------------------------------

    def get_vertex(self, element_id: Hashable) -> RxVertex | None:
        """Return the vertex with *element_id*, or ``None``."""
        idx = self._id_to_idx.get(element_id)
        if idx is None:
            return None
        return RxVertex(self, idx)

    def vertex(self, element_id: Hashable) -> RxVertex:
        """Return the vertex with *element_id*.  Raises ``ElementNotFoundError``."""
        return RxVertex(self, self._require_vertex(element_id))

    def all_vertices(self, kind: str | None = None) -> list[RxVertex]:
        """All vertices in insertion order, optionally only those of one kind."""
        vertices = [RxVertex(self, idx) for idx in self._id_to_idx.values()]
        if kind is None:
            return vertices
        return [v for v in vertices if kind_of(v) == kind]

    def edges(self) -> list[RxEdge]:
        """All edges in insertion order, without traversal direction."""
        return [
            RxEdge(self, data["index"], src, tgt)
            for src, tgt, data in sorted(
                self._graph.weighted_edge_list(), key=lambda t: t[2]["index"]
            )
        ]

    @property
    def vertex_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._id_to_idx

    def __repr__(self) -> str:
        state = ", sealed" if self._sealed else ""
        return f"RustworkxGraph(vertices={self.vertex_count}, edges={self.edge_count}{state})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _incident(
        self,
        idx: int,
        labels: Collection[str] | None,
        *,
        outgoing: bool,
    ) -> Iterator[RxEdge]:
        """Incident edges of node *idx* in insertion order."""
        wanted = prepare_labels(labels)
        raw = self._graph.out_edges(idx) if outgoing else self._graph.in_edges(idx)
        for src, tgt, data in sorted(raw, key=lambda t: t[2]["index"]):
            if wanted is None or data["label"] in wanted:
                yield RxEdge(self, data["index"], src, tgt, forward=outgoing)

    def _require_vertex(self, vertex_id: Hashable) -> int:
        """Return the rustworkx index for *vertex_id*, or raise ``ElementNotFoundError``."""
        try:
            return self._id_to_idx[vertex_id]
        except KeyError:
            msg = f"Vertex not found: {vertex_id!r}"
            raise ElementNotFoundError(msg) from None

    def _require_mutable(self) -> None:
        if self._sealed:
            msg = "Graph is sealed; build a new graph to make changes"
            raise GraphSealedError(msg)


class RxVertex(Vertex):
    """A vertex of a :class:`RustworkxGraph`."""

    __slots__ = ("_index", "_store")

    def __init__(self, store: RustworkxGraph, index: int) -> None:
        self._store = store
        self._index = index

    @property
    def element_id(self) -> Hashable:
        return self._store._graph[self._index]["id"]

    @property
    def graph(self) -> RustworkxGraph:
        return self._store

    def get_document(self) -> Any:
        return self._store._graph[self._index]["document"]

    def out_edges(self, labels: Collection[str] | None = None) -> Iterator[RxEdge]:
        return self._store._incident(self._index, labels, outgoing=True)

    def in_edges(self, labels: Collection[str] | None = None) -> Iterator[RxEdge]:
        return self._store._incident(self._index, labels, outgoing=False)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RxVertex):
            return self._store is other._store and self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.element_id)

    def __repr__(self) -> str:
        return f"v({self.element_id!r})"


class RxEdge(Edge):
    """An edge of a :class:`RustworkxGraph`, remembering how it was reached."""

    __slots__ = ("_forward", "_index", "_source", "_store", "_target")

    def __init__(
        self,
        store: RustworkxGraph,
        index: int,
        source: int,
        target: int,
        *,
        forward: bool | None = None,
    ) -> None:
        self._store = store
        self._index = index
        self._source = source
        self._target = target
        self._forward = forward

    @property
    def element_id(self) -> int:
        return self._index

    @property
    def graph(self) -> RustworkxGraph:
        return self._store

    def get_document(self) -> Any:
        return self._store._graph.get_edge_data_by_index(self._index)["document"]

    @property
    def label(self) -> str:
        return self._store._graph.get_edge_data_by_index(self._index)["label"]

    def out_vertex(self) -> RxVertex:
        return RxVertex(self._store, self._source)

    def in_vertex(self) -> RxVertex:
        return RxVertex(self._store, self._target)

    @property
    def traversed_forward(self) -> bool | None:
        return self._forward

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RxEdge):
            return self._store is other._store and self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("edge", self._index))

    def __repr__(self) -> str:
        src = self._store._graph[self._source]["id"]
        tgt = self._store._graph[self._target]["id"]
        return f"e({src!r} -[{self.label}]-> {tgt!r})"
