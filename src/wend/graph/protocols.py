"""Graph element interfaces: the closed set of variants the traversal engine consumes.

The engine only ever talks to storage through these four abstract classes and the
module-level accessor functions below.  Storage backends subclass them; the
path-tracking decorators in :mod:`wend.path` subclass them too, wrapping any
backend's elements by composition.

Equality and hashing are left to concrete classes, with one rule: a wrapper must
compare and hash exactly like the raw element it wraps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterable


class Element(ABC):
    """A vertex or an edge: a stable id plus an optional attached document."""

    __slots__ = ()

    @property
    @abstractmethod
    def element_id(self) -> Hashable: ...

    @property
    @abstractmethod
    def graph(self) -> Graph: ...

    @abstractmethod
    def get_document(self) -> Any:
        """Return the attached property payload, or ``None``."""
        ...


class Vertex(Element):
    """An element that can enumerate its incident edges."""

    __slots__ = ()

    @abstractmethod
    def out_edges(self, labels: Collection[str] | None = None) -> Iterable[Edge]:
        """Edges pointing out of this vertex, optionally restricted to *labels*."""
        ...

    @abstractmethod
    def in_edges(self, labels: Collection[str] | None = None) -> Iterable[Edge]:
        """Edges pointing in to this vertex, optionally restricted to *labels*."""
        ...


class Edge(Element):
    """A labeled, directed element with two fixed endpoints."""

    __slots__ = ()

    @property
    @abstractmethod
    def label(self) -> str: ...

    @abstractmethod
    def out_vertex(self) -> Vertex:
        """The source endpoint, regardless of how this edge was reached."""
        ...

    @abstractmethod
    def in_vertex(self) -> Vertex:
        """The target endpoint, regardless of how this edge was reached."""
        ...

    @property
    def traversed_forward(self) -> bool | None:
        """``True`` if reached by following an out-edge, ``False`` for an in-edge.

        ``None`` when the edge was not produced by a directional step.
        """
        return None


class Graph(ABC):
    """Graph-level entry points."""

    __slots__ = ()

    @abstractmethod
    def get_vertex(self, element_id: Hashable) -> Vertex | None: ...

    @abstractmethod
    def all_vertices(self) -> Iterable[Vertex]: ...


# ------------------------------------------------------------------
# Accessors
# ------------------------------------------------------------------


def is_vertex(x: object) -> bool:
    return isinstance(x, Vertex)


def is_edge(x: object) -> bool:
    return isinstance(x, Edge)


def is_graph(x: object) -> bool:
    return isinstance(x, Graph)


def is_element(x: object) -> bool:
    return isinstance(x, Element)


def element_id(e: Element) -> Hashable:
    return e.element_id


def get_document(e: Element) -> Any:
    return e.get_document()


def label(e: Edge) -> str:
    return e.label


def out_edges(v: Vertex, labels: Collection[str] | None = None) -> Iterable[Edge]:
    return v.out_edges(labels)


def in_edges(v: Vertex, labels: Collection[str] | None = None) -> Iterable[Edge]:
    return v.in_edges(labels)


def out_vertex(e: Edge) -> Vertex:
    return e.out_vertex()


def in_vertex(e: Edge) -> Vertex:
    return e.in_vertex()


def all_vertices(g: Graph) -> Iterable[Vertex]:
    return g.all_vertices()


def get_vertex(g: Graph, element_id: Hashable) -> Vertex | None:
    return g.get_vertex(element_id)
