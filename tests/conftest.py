# tests/conftest.py
"""
Shared test fixtures.
Stub graph: four people, Peter -> Andy ("1") and Vincent -> Tom ("2").
"""
from types import SimpleNamespace

import pytest
from sparsegraph import SparseGraph


_PEOPLE = ["Peter", "Andy", "Vincent", "Tom"]


def _build_people(graph: SparseGraph) -> SimpleNamespace:
    vertices = {name.lower(): graph.insert_vertex(name) for name in _PEOPLE}
    return SimpleNamespace(graph=graph, **vertices)


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> SparseGraph:
    """A graph with no vertices or edges."""
    return SparseGraph()


@pytest.fixture
def people():
    """Four vertices, no edges. Attributes: graph, peter, andy, vincent, tom."""
    return _build_people(SparseGraph())


@pytest.fixture
def people_with_edges(people):
    """
    Same four vertices plus two edges:

        Peter --"1"--> Andy        Vincent --"2"--> Tom
    """
    people.e1 = people.graph.insert_edge(people.peter, people.andy, "1")
    people.e2 = people.graph.insert_edge(people.vincent, people.tom, "2")
    return people


@pytest.fixture
def twin_people():
    """A second, structurally identical graph (four vertices, no edges)."""
    return _build_people(SparseGraph())
