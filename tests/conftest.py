"""Shared graph fixtures for wend tests."""

from __future__ import annotations

import pytest

from wend.graph import RustworkxGraph


@pytest.fixture
def triangle() -> RustworkxGraph:
    """Directed 3-cycle a -> b -> c -> a, every edge labeled ``L``."""
    return RustworkxGraph().add_edges("L", [("a", "b"), ("b", "c"), ("c", "a")]).seal()


@pytest.fixture
def chain() -> RustworkxGraph:
    """Straight line a -> b -> c -> d -> e labeled ``next``."""
    return (
        RustworkxGraph()
        .add_edges("next", [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")])
        .seal()
    )


@pytest.fixture
def dag() -> RustworkxGraph:
    """Diamond-ish DAG with leaves d, e and f.

    a -> b, a -> c, b -> d, c -> d, c -> e, a -> f
    """
    return (
        RustworkxGraph()
        .add_edges(
            "child",
            [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("c", "e"), ("a", "f")],
        )
        .seal()
    )


@pytest.fixture
def cycles_graph() -> RustworkxGraph:
    """a -> b -> c -> a plus shortcuts a -> d and c -> d, labeled ``knows``."""
    return (
        RustworkxGraph()
        .add_edges("knows", [("a", "b"), ("b", "c"), ("c", "a"), ("a", "d"), ("c", "d")])
        .seal()
    )


@pytest.fixture
def job_graph() -> RustworkxGraph:
    """People apply to jobs that companies created (a TinkerPop recipe graph)."""
    g = RustworkxGraph()
    g.add_edges(
        "completes",
        [
            ("bob", "appBob1"),
            ("bob", "appBob2"),
            ("stephen", "appStephen1"),
            ("stephen", "appStephen2"),
        ],
    )
    g.add_edges(
        "appliesTo",
        [
            ("appBob1", "blueprintsJob1"),
            ("appBob2", "blueprintsJob2"),
            ("appStephen1", "rexsterJob1"),
            ("appStephen2", "blueprintsJob3"),
        ],
    )
    g.add_edges(
        "created",
        [
            ("blueprints", "blueprintsJob1", {"creationDate": "12/20/2015"}),
            ("blueprints", "blueprintsJob2", {"creationDate": "12/15/2015"}),
            ("blueprints", "blueprintsJob3", {"creationDate": "12/16/2015"}),
            ("rexster", "rexsterJob1", {"creationDate": "12/18/2015"}),
        ],
    )
    g.add_vertices(
        [
            ("bob", {"type": "person", "name": "Bob"}),
            ("stephen", {"type": "person", "name": "Stephen"}),
            ("blueprints", {"type": "company", "name": "Blueprints, Inc"}),
            ("rexster", {"type": "company", "name": "Rexster, LLC"}),
        ]
    )
    return g.seal()
