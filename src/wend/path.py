"""Path tracking: decorate vertices and edges with the lineage that reached them.

Wrapping is lazy and local: a wrapped vertex re-wraps each edge it yields with a
back-link to itself, and a wrapped edge re-wraps each endpoint with a back-link
to itself.  No central bookkeeping exists; the lineage of any element is just
the chain of back-links, walked on demand.

Wrappers are transparent to equality and hashing, so sets, dict keys and
``in`` tests behave exactly as they would for the raw elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wend.exceptions import InvalidArgumentError
from wend.graph.protocols import Edge, Element, Graph, Vertex

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterator


class PathVertex(Vertex):
    """A vertex plus a back-link to the edge that led to it (``None`` at a root)."""

    __slots__ = ("element", "previous")

    def __init__(self, element: Vertex, previous: PathEdge | None = None) -> None:
        self.element = element
        self.previous = previous

    @property
    def element_id(self) -> Hashable:
        return self.element.element_id

    @property
    def graph(self) -> Graph:
        return self.element.graph

    def get_document(self) -> Any:
        return self.element.get_document()

    def out_edges(self, labels: Collection[str] | None = None) -> Iterator[PathEdge]:
        return (PathEdge(e, self) for e in self.element.out_edges(labels))

    def in_edges(self, labels: Collection[str] | None = None) -> Iterator[PathEdge]:
        return (PathEdge(e, self) for e in self.element.in_edges(labels))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Element):
            return strip_all_path_layers(self) == strip_all_path_layers(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"PathVertex[{_render_path(self)}]"


class PathEdge(Edge):
    """An edge plus a back-link to the vertex it was reached from."""

    __slots__ = ("element", "previous")

    def __init__(self, element: Edge, previous: PathVertex | None = None) -> None:
        self.element = element
        self.previous = previous

    @property
    def element_id(self) -> Hashable:
        return self.element.element_id

    @property
    def graph(self) -> Graph:
        return self.element.graph

    def get_document(self) -> Any:
        return self.element.get_document()

    @property
    def label(self) -> str:
        return self.element.label

    def out_vertex(self) -> PathVertex:
        return PathVertex(self.element.out_vertex(), self)

    def in_vertex(self) -> PathVertex:
        return PathVertex(self.element.in_vertex(), self)

    @property
    def traversed_forward(self) -> bool | None:
        return self.element.traversed_forward

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Element):
            return strip_all_path_layers(self) == strip_all_path_layers(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"PathEdge[{_render_path(self)}]"


class PathGraph(Graph):
    """A graph whose entry points hand out path-tracking root vertices.

    Only elements retrieved through this wrapper are tracked; elements already
    obtained from the underlying graph are unaffected.
    """

    __slots__ = ("graph",)

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def get_vertex(self, element_id: Hashable) -> PathVertex | None:
        v = self.graph.get_vertex(element_id)
        return None if v is None else PathVertex(v)

    def all_vertices(self) -> Iterator[PathVertex]:
        return (PathVertex(v) for v in self.graph.all_vertices())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathGraph):
            return self.graph == other.graph
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.graph)

    def __repr__(self) -> str:
        return f"PathGraph({self.graph!r})"


type Tracked = PathVertex | PathEdge


class ReversePath:
    """The lineage of an element walked backward to its root.

    Iterating re-walks the back-links from the start each time, so the
    sequence can be consumed any number of times.
    """

    __slots__ = ("_start",)

    def __init__(self, start: Any) -> None:
        self._start = start

    def __iter__(self) -> Iterator[Any]:
        node = self._start
        if not isinstance(node, (PathVertex, PathEdge)):
            yield node
            return
        while node is not None:
            yield node.element
            node = node.previous

    def __repr__(self) -> str:
        return f"ReversePath({list(self)!r})"


def with_path(e: Vertex | Edge | Graph) -> PathVertex | PathEdge | PathGraph:
    """Begin tracking paths from *e*, making it a traversal root.

    A graph is wrapped so that every vertex subsequently fetched from it is a
    root.  Wrapping an already tracked element adds a new layer.
    """
    if isinstance(e, Vertex):
        return PathVertex(e)
    if isinstance(e, Edge):
        return PathEdge(e)
    if isinstance(e, Graph):
        return PathGraph(e)
    msg = f"Cannot track paths for {type(e).__name__}: expected a vertex, edge or graph"
    raise InvalidArgumentError(msg)


def is_path_tracked(e: object) -> bool:
    """Return ``True`` if *e* is wrapped to track its path."""
    return isinstance(e, (PathVertex, PathEdge))


def reverse_path(e: Any) -> ReversePath:
    """Lineage from *e* back to the root (current first, root last)."""
    return ReversePath(e)


def path(e: Any) -> list[Any]:
    """Full lineage from the root to *e* (root first, current last).

    Recomputed on every call.  An untracked element is its own one-item path.
    """
    lineage = list(reverse_path(e))
    lineage.reverse()
    return lineage


def strip_one_path_layer(e: Any) -> Any:
    """Remove one layer of path tracking; anything untracked is returned as is."""
    if isinstance(e, (PathVertex, PathEdge)):
        return e.element
    if isinstance(e, PathGraph):
        return e.graph
    return e


def strip_all_path_layers(e: Any) -> Any:
    """Remove every layer of path tracking, returning the raw element."""
    while True:
        inner = strip_one_path_layer(e)
        if inner is e:
            return e
        e = inner


def find_repeated_edge(e: Any, max_depth: int | None = None) -> Edge | None:
    """Return the first edge seen twice walking back from *e*, else ``None``.

    Only repeated edges count: reaching the same vertex twice through distinct
    edges is not reported.  With *max_depth*, the search gives up once
    *max_depth* distinct edges have been remembered without a repeat; it must
    be at least 1.  Untracked elements have no history and return ``None``.
    """
    if max_depth is not None and max_depth < 1:
        msg = f"max_depth must be at least 1, got {max_depth}"
        raise InvalidArgumentError(msg)
    if not is_path_tracked(e):
        return None
    seen: set[Edge] = set()
    remaining = max_depth
    for item in reverse_path(e):
        if not isinstance(item, Edge):
            continue
        if item in seen:
            return item
        if remaining is not None:
            if remaining == 0:
                return None
            remaining -= 1
        seen.add(item)
    return None


def _render_path(e: Tracked) -> str:
    return " ".join(repr(strip_all_path_layers(x)) for x in path(e))
