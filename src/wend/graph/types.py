"""Graph value types: typed identifiers and label sets."""

from __future__ import annotations

from collections.abc import Collection, Hashable
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from wend.graph.protocols import Element


class KindId(NamedTuple):
    """A vertex id tagged with the kind of thing it identifies.

    Attributes:
        kind: Type tag, e.g. ``"person"``.
        id: The identifier within that kind.
    """

    kind: str
    id: Hashable

    def __repr__(self) -> str:
        return f"k({self.kind!r}, {self.id!r})"


def k(kind: str, id: Hashable) -> KindId:  # noqa: A002
    """Shorthand constructor for :class:`KindId`."""
    return KindId(kind, id)


def kind(e: Element) -> str | None:
    """Return the kind of *e*'s id, or ``None`` if the id is untyped."""
    eid = e.element_id
    if isinstance(eid, KindId):
        return eid.kind
    return None


def prepare_labels(labels: str | Collection[str] | None) -> frozenset[str] | None:
    """Normalize a label argument.

    ``None`` and empty collections mean "no restriction" and become ``None``;
    a bare string is a single label.
    """
    if labels is None:
        return None
    if isinstance(labels, str):
        return frozenset((labels,))
    prepared = frozenset(labels)
    return prepared or None
