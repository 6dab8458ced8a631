from collections.abc import Callable, Sequence

import pytest

from specgraph.spec import SpecRecord, build_relationship_graph
from specgraph.spec._graph import RelationshipGraph


@pytest.fixture
def make_record() -> Callable[..., SpecRecord]:
    def _make(spec_id: str = "001-feature", **overrides: object) -> SpecRecord:
        defaults: dict[str, object] = {
            "id": spec_id,
            "depends_on": (),
            "body": "",
            "status": "planned",
            "frontmatter": {"status": "planned"},
        }
        defaults.update(overrides)
        if isinstance(defaults["depends_on"], list):
            defaults["depends_on"] = tuple(defaults["depends_on"])  # pyright: ignore[reportArgumentType]
        return SpecRecord(**defaults)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def make_graph(
    make_record: Callable[..., SpecRecord],
) -> Callable[[dict[str, Sequence[str]]], RelationshipGraph]:
    """Build a graph from ``{spec_id: depends_on}`` in insertion order."""

    def _make(edges: dict[str, Sequence[str]]) -> RelationshipGraph:
        return build_relationship_graph(
            make_record(spec_id, depends_on=tuple(deps)) for spec_id, deps in edges.items()
        )

    return _make
