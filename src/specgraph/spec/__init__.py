"""Spec integrity engine.

Normalizes declared dependencies, builds the relationship graph, detects
cycles and sequence conflicts, validates document structure, and applies
link and unlink mutations through a filesystem store.
"""

from specgraph.spec._alignment import DependencyAlignmentValidator
from specgraph.spec._corruption import CorruptionValidator
from specgraph.spec._frontmatter import FrontmatterValidator
from specgraph.spec._graph import (
    RelationshipGraph,
    build_relationship_graph,
    downstream,
    find_cycle,
    find_cycles_through,
    impact,
    upstream,
)
from specgraph.spec._manager import SpecManager
from specgraph.spec._models import (
    CheckMode,
    ConflictReport,
    CorpusSnapshot,
    CycleWarning,
    DependencyView,
    DepsMode,
    LinkResult,
    LoadFailure,
    ParsedSpecName,
    Relationships,
    SequenceConflict,
    Severity,
    SpecPriority,
    SpecRecord,
    SpecStatus,
    UnlinkResult,
    ValidationFinding,
    ValidationReport,
    ValidationSummary,
)
from specgraph.spec._normalize import extract_depends_on, normalize_relationship_list
from specgraph.spec._sequence import (
    build_sequence_index,
    find_sequence_conflicts,
    parse_spec_name,
    render_conflict_report,
)
from specgraph.spec._store import SpecStore, resolve_spec_reference
from specgraph.spec._structure import LineCountValidator, StructureValidator

__all__ = [
    "CheckMode",
    "ConflictReport",
    "CorpusSnapshot",
    "CorruptionValidator",
    "CycleWarning",
    "DependencyAlignmentValidator",
    "DependencyView",
    "DepsMode",
    "FrontmatterValidator",
    "LineCountValidator",
    "LinkResult",
    "LoadFailure",
    "ParsedSpecName",
    "RelationshipGraph",
    "Relationships",
    "SequenceConflict",
    "Severity",
    "SpecManager",
    "SpecPriority",
    "SpecRecord",
    "SpecStatus",
    "SpecStore",
    "StructureValidator",
    "UnlinkResult",
    "ValidationFinding",
    "ValidationReport",
    "ValidationSummary",
    "build_relationship_graph",
    "build_sequence_index",
    "downstream",
    "extract_depends_on",
    "find_cycle",
    "find_cycles_through",
    "find_sequence_conflicts",
    "impact",
    "normalize_relationship_list",
    "parse_spec_name",
    "render_conflict_report",
    "resolve_spec_reference",
    "upstream",
]
