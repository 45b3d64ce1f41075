"""Graph layer — the element interface and a rustworkx-backed in-memory store."""

from wend.graph._rustworkx import RustworkxGraph, RxEdge, RxVertex
from wend.graph.protocols import (
    Edge,
    Element,
    Graph,
    Vertex,
    all_vertices,
    element_id,
    get_document,
    get_vertex,
    in_edges,
    in_vertex,
    is_edge,
    is_element,
    is_graph,
    is_vertex,
    label,
    out_edges,
    out_vertex,
)
from wend.graph.types import KindId, k, kind

__all__ = [
    "Edge",
    "Element",
    "Graph",
    "KindId",
    "RustworkxGraph",
    "RxEdge",
    "RxVertex",
    "Vertex",
    "all_vertices",
    "element_id",
    "get_document",
    "get_vertex",
    "in_edges",
    "in_vertex",
    "is_edge",
    "is_element",
    "is_graph",
    "is_vertex",
    "k",
    "kind",
    "label",
    "out_edges",
    "out_vertex",
]
