# -*- coding: utf-8 -*-
"""
Core data structures for network comparison

Single source of truth for the records passed between comparison components: canonical
edges, paths, degree entries, identity reports and the result tables consumed by plotting
and reporting code. Import from this module rather than individual modules.

Examples:
# Canonical edges are order independent
    from netcompare.utils.dataclasses import Edge
    Edge.of("g2", "g1") == Edge.of("g1", "g2")   # True

    # Result tables convert to pandas for external consumers
    df = result.degree_curve.to_dataframe()

"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
import math

import pandas as pd


# ============================================================================
# ENUMS
# ============================================================================

class Sentinel(Enum):
    """Markers reported instead of a percentage when one input has no edges."""
    NO_NODE = "NO_NODE"          # Reference side is empty
    NOT_APPLICABLE = "/"         # Other side is empty

    def __str__(self):
        return self.value


class Provenance(Enum):
    """Where the values of a result table row came from."""
    COMPUTED = "computed"
    NOT_APPLICABLE = "not_applicable"   # No node of this degree on one side
    DEFAULT = "default"                 # Preallocated slot never overwritten


# ============================================================================
# GRAPH ELEMENTS
# ============================================================================

@dataclass(frozen=True, order=True)
class Edge:
    """
    Undirected edge in canonical form (a <= b).

    Build through Edge.of() so that (x, y) and (y, x) map to one value.
    Self-loops are kept as degenerate pairs (a == b).
    """
    a: str
    b: str

    @classmethod
    def of(cls, source, target) -> "Edge":
        source, target = str(source), str(target)
        if target < source:
            source, target = target, source
        return cls(source, target)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.a, self.b)

    def touches(self, nodes) -> bool:
        """True if at least one endpoint is in nodes."""
        return self.a in nodes or self.b in nodes


@dataclass(frozen=True)
class Path:
    """
    Simple path as traversed: nodes in visiting order.

    Keys are direction sensitive, so X-Y-Z and Z-Y-X are different paths.
    """
    nodes: Tuple[str, ...]

    @property
    def length(self) -> int:
        """Number of edges."""
        return len(self.nodes) - 1

    @property
    def key(self) -> Tuple[str, ...]:
        return self.nodes

    @property
    def undirected_key(self) -> Tuple[str, ...]:
        """Key shared by a path and its reverse."""
        return min(self.nodes, self.nodes[::-1])

    def label(self, separator: str = "-") -> str:
        return separator.join(self.nodes)


@dataclass(frozen=True)
class DegreeEntry:
    """One row of a degree table."""
    node: str
    degree: int


# ============================================================================
# DEGREE TABLE
# ============================================================================

@dataclass
class DegreeTable:
    """Degree of every node of one graph."""
    degrees: Dict[str, int] = field(default_factory=dict)

    def __len__(self):
        return len(self.degrees)

    def __getitem__(self, node: str) -> int:
        return self.degrees[node]

    @property
    def max_degree(self) -> int:
        return max(self.degrees.values()) if self.degrees else 0

    def nodes_with_degree(self, degree: int) -> set:
        return {node for node, d in self.degrees.items() if d == degree}

    def entries(self) -> List[DegreeEntry]:
        return [DegreeEntry(node, d) for node, d in sorted(self.degrees.items())]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [asdict(e) for e in self.entries()],
            columns=["node", "degree"],
        )


# ============================================================================
# IDENTITY REPORTS
# ============================================================================

Percentage = Union[float, Sentinel]


@dataclass(frozen=True)
class IdentityReport:
    """
    Degree-1 identity between two edge sets.

    percent_a uses graph A as the reference denominator, percent_b uses graph B.
    Either value is a Sentinel when one input was empty.
    """
    percent_a: Percentage
    percent_b: Percentage
    matched: int = 0                  # Edges present in both inputs

    @property
    def is_computed(self) -> bool:
        return not isinstance(self.percent_a, Sentinel) and not isinstance(self.percent_b, Sentinel)

    def as_tuple(self) -> Tuple[Percentage, Percentage]:
        return (self.percent_a, self.percent_b)


@dataclass(frozen=True)
class PathIdentityReport:
    """
    Identity over simple paths of one exact length.

    Percentages are NaN when the corresponding path set is empty.
    """
    length: int
    percent_a: float
    percent_b: float
    paths_a: int
    paths_b: int
    matched_a: int = 0                # Paths of B reproduced by A
    matched_b: int = 0                # Paths of A reproduced by B

    @property
    def is_defined(self) -> bool:
        return not (math.isnan(self.percent_a) or math.isnan(self.percent_b))

    @property
    def both_zero(self) -> bool:
        return self.percent_a == 0 and self.percent_b == 0


# ============================================================================
# RESULT TABLES
# ============================================================================

@dataclass
class DegreeIdentityRow:
    """Identity restricted to edges touching nodes of one degree."""
    degree: int
    percent_a: float
    percent_b: float
    provenance: Provenance
    sentinel_a: Optional[Sentinel] = None
    sentinel_b: Optional[Sentinel] = None

    @property
    def is_applicable(self) -> bool:
        return self.provenance is Provenance.COMPUTED


@dataclass
class PathIdentityRow:
    """Identity over paths of one length."""
    length: int
    percent_a: float
    percent_b: float
    provenance: Provenance


@dataclass
class DegreeIdentityCurve:
    """Degree-vs-identity table, one row per degree 1..max degree."""
    rows: List[DegreeIdentityRow] = field(default_factory=list)

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def row(self, degree: int) -> DegreeIdentityRow:
        return self.rows[degree - 1]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "degree": r.degree,
                    "percent_a": r.percent_a,
                    "percent_b": r.percent_b,
                    "provenance": r.provenance.value,
                    "sentinel_a": r.sentinel_a.value if r.sentinel_a else None,
                    "sentinel_b": r.sentinel_b.value if r.sentinel_b else None,
                }
                for r in self.rows
            ],
            columns=["degree", "percent_a", "percent_b", "provenance", "sentinel_a", "sentinel_b"],
        )


@dataclass
class PathIdentityCurve:
    """Path-length-vs-identity table, one row per length 1..n_max."""
    rows: List[PathIdentityRow] = field(default_factory=list)
    longest_a: int = 0                # Longest path in A (nodes), up to cutoff
    longest_b: int = 0

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def row(self, length: int) -> PathIdentityRow:
        return self.rows[length - 1]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "path_length": r.length,
                    "percent_a": r.percent_a,
                    "percent_b": r.percent_b,
                    "provenance": r.provenance.value,
                }
                for r in self.rows
            ],
            columns=["path_length", "percent_a", "percent_b", "provenance"],
        )


@dataclass
class ComparisonResult:
    """Complete output of one two-network comparison."""
    label_a: str
    label_b: str
    edges_a: int
    edges_b: int
    degrees_a: DegreeTable
    degrees_b: DegreeTable
    identity: IdentityReport
    degree_curve: DegreeIdentityCurve
    path_curve: PathIdentityCurve

    def summary(self) -> Dict:
        """Flat, JSON-friendly overview (no per-row data)."""
        return {
            "label_a": self.label_a,
            "label_b": self.label_b,
            "edges_a": self.edges_a,
            "edges_b": self.edges_b,
            "nodes_a": len(self.degrees_a),
            "nodes_b": len(self.degrees_b),
            "max_degree_a": self.degrees_a.max_degree,
            "max_degree_b": self.degrees_b.max_degree,
            "identity_a": str(self.identity.percent_a),
            "identity_b": str(self.identity.percent_b),
            "degree_rows": len(self.degree_curve),
            "degree_rows_not_applicable": sum(
                1 for r in self.degree_curve if r.provenance is Provenance.NOT_APPLICABLE
            ),
            "path_rows": len(self.path_curve),
            "longest_path_a": self.path_curve.longest_a,
            "longest_path_b": self.path_curve.longest_b,
        }
