# -*- coding: utf-8 -*-
"""
Two-network comparison orchestrator.

Runs the complete comparison of two inferred networks from their raw edge tables:
(1) Canonicalization - order-independent, deduplicated edge sets,
(2) Degree profiling - degree table of each network,
(3) Degree-1 identity - per-reference edge overlap,
(4) Degree-conditioned identity - identity restricted to each degree value,
(5) Path-length sweep - path identity for d = 1..n_max.

The sweep bound n_max is found by enumerating each network up to a length cutoff,
taking the longest simple path present in each (in nodes), and subtracting one from the
smaller. Path-length slots are preallocated with TABLE_CONFIG 'path_slot_default' and a
slot is only written when at least one percentage is non-zero, unless
overwrite_zero_rows is set; unwritten slots are flagged Provenance.DEFAULT.

All steps are pure functions of the inputs. Built graphs are cached on their canonical
edge set, so repeated comparisons of the same network do not rebuild it.

Examples:
    from netcompare.analysis.comparison_processor import ComparisonProcessor

    processor = ComparisonProcessor(max_length_cutoff=6)
    result = processor.compare(records_a, records_b, label_a="GENIE3", label_b="ARACNE")

    print(result.identity.percent_a, result.identity.percent_b)
    result.degree_curve.to_dataframe().to_csv("degree_identity.csv", index=False)
    result.path_curve.to_dataframe().to_csv("path_identity.csv", index=False)
"""
# Standard library
import logging
from typing import Any, Iterable, Optional

# Third-party
import networkx as nx
from tqdm import tqdm

# Config imports (direct)
from netcompare.utils.config import PATH_CONFIG, TABLE_CONFIG

# Local module imports
from netcompare.analysis.degree_identity import compute_degree_identity
from netcompare.analysis.identity import compute_identity
from netcompare.analysis.path_identity import compute_path_identity
from netcompare.graph.builder import build_graph
from netcompare.graph.canonicalizer import canonicalize_edges
from netcompare.graph.degree import profile_degrees
from netcompare.graph.paths import longest_path_nodes
from netcompare.utils.dataclasses import (
    ComparisonResult,
    PathIdentityCurve,
    PathIdentityRow,
    Provenance,
)

logger = logging.getLogger(__name__)


class ComparisonProcessor:
    """
    Compare two undirected networks.

    Coordinates:
    - Edge canonicalization and graph building for both inputs
    - Degree tables, degree-1 identity and the degree-vs-identity curve
    - The path-length-vs-identity sweep
    """

    def __init__(
        self,
        max_length_cutoff: Optional[int] = None,
        max_paths: Optional[int] = None,
        canonical_direction: Optional[bool] = None,
        overwrite_zero_rows: Optional[bool] = None,
        show_progress: bool = False,
    ):
        """
        Initialize comparison processor.

        Args:
            max_length_cutoff: Longest path length (edges) looked for when sizing the
                sweep (PATH_CONFIG default)
            max_paths: Enumeration cap per graph and length (PATH_CONFIG default)
            canonical_direction: Merge paths with their reverse (PATH_CONFIG default)
            overwrite_zero_rows: Write sweep rows where both percentages are 0
                (TABLE_CONFIG default)
            show_progress: Show tqdm progress bars over sweeps
        """
        self.max_length_cutoff = (
            max_length_cutoff if max_length_cutoff is not None
            else PATH_CONFIG['max_length_cutoff']
        )
        self.max_paths = max_paths if max_paths is not None else PATH_CONFIG['max_paths']
        self.canonical_direction = (
            canonical_direction if canonical_direction is not None
            else PATH_CONFIG['canonical_direction']
        )
        self.overwrite_zero_rows = (
            overwrite_zero_rows if overwrite_zero_rows is not None
            else TABLE_CONFIG['overwrite_zero_rows']
        )
        self.show_progress = show_progress

        if self.max_length_cutoff < 1:
            raise ValueError(f"max_length_cutoff must be >= 1, got {self.max_length_cutoff}")
        if self.max_paths < 1:
            raise ValueError(f"max_paths must be >= 1, got {self.max_paths}")

    # ------------------------------------------------------------------------
    # PATH-LENGTH SWEEP
    # ------------------------------------------------------------------------

    def sweep_bound(self, graph_a: nx.Graph, graph_b: nx.Graph) -> tuple:
        """
        Longest path (nodes) of each graph up to the cutoff, and the sweep bound.

        Returns:
            (longest_a, longest_b, n_max); n_max < 1 means nothing to sweep
        """
        longest_a = longest_path_nodes(graph_a, self.max_length_cutoff, self.max_paths)
        longest_b = longest_path_nodes(graph_b, self.max_length_cutoff, self.max_paths)
        return longest_a, longest_b, min(longest_a, longest_b) - 1

    def path_identity_curve(
        self,
        edges_a: Iterable[Any],
        edges_b: Iterable[Any],
    ) -> PathIdentityCurve:
        """
        Path-length-vs-identity table for d = 1..n_max.

        Args:
            edges_a: Edge set or raw records of network A
            edges_b: Edge set or raw records of network B

        Returns:
            PathIdentityCurve; empty when either network has no edges
        """
        graph_a = build_graph(edges_a)
        graph_b = build_graph(edges_b)
        longest_a, longest_b, n_max = self.sweep_bound(graph_a, graph_b)

        slot_default = TABLE_CONFIG['path_slot_default']
        rows = [
            PathIdentityRow(d, slot_default, slot_default, Provenance.DEFAULT)
            for d in range(1, n_max + 1)
        ]

        for row in tqdm(rows, desc="Path identity", disable=not self.show_progress):
            report = compute_path_identity(
                graph_a,
                graph_b,
                row.length,
                canonical_direction=self.canonical_direction,
                max_paths=self.max_paths,
            )
            if report.both_zero and not self.overwrite_zero_rows:
                continue
            row.percent_a = report.percent_a
            row.percent_b = report.percent_b
            row.provenance = Provenance.COMPUTED

        logger.info(
            f"Path identity: longest paths {longest_a}/{longest_b} nodes "
            f"(cutoff {self.max_length_cutoff} edges), {len(rows)} lengths swept"
        )
        return PathIdentityCurve(rows, longest_a=longest_a, longest_b=longest_b)

    # ------------------------------------------------------------------------
    # FULL COMPARISON
    # ------------------------------------------------------------------------

    def compare(
        self,
        records_a: Iterable[Any],
        records_b: Iterable[Any],
        label_a: str = "A",
        label_b: str = "B",
    ) -> ComparisonResult:
        """
        Run every comparison step on two raw edge tables.

        Args:
            records_a: Raw (from, to) records of network A
            records_b: Raw (from, to) records of network B
            label_a: Display name of network A
            label_b: Display name of network B

        Returns:
            ComparisonResult with degree tables, identity report and both curves
        """
        edges_a = canonicalize_edges(records_a)
        edges_b = canonicalize_edges(records_b)
        logger.info(
            f"Comparing {label_a} ({len(edges_a)} edges) with {label_b} ({len(edges_b)} edges)"
        )

        degrees_a = profile_degrees(build_graph(edges_a))
        degrees_b = profile_degrees(build_graph(edges_b))

        identity = compute_identity(edges_a, edges_b)
        if identity.is_computed:
            logger.info(
                f"Degree-1 identity: {identity.percent_a:.1f}% ({label_a} reference), "
                f"{identity.percent_b:.1f}% ({label_b} reference)"
            )
        else:
            logger.warning(
                f"Degree-1 identity not computable: {label_a}={identity.percent_a}, "
                f"{label_b}={identity.percent_b}"
            )

        degree_curve = compute_degree_identity(
            edges_a,
            edges_b,
            degrees_a=degrees_a,
            degrees_b=degrees_b,
            show_progress=self.show_progress,
        )
        path_curve = self.path_identity_curve(edges_a, edges_b)

        return ComparisonResult(
            label_a=label_a,
            label_b=label_b,
            edges_a=len(edges_a),
            edges_b=len(edges_b),
            degrees_a=degrees_a,
            degrees_b=degrees_b,
            identity=identity,
            degree_curve=degree_curve,
            path_curve=path_curve,
        )
