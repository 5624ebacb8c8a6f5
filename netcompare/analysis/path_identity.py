# -*- coding: utf-8 -*-
"""
Identity over simple paths of one exact length.

Generalizes the degree-1 identity from edges to paths: both networks are enumerated for
simple paths of exactly d edges, each path is keyed by its node sequence, and the same
per-reference overlap ratio is taken over the two key sets. At d = 1 the result equals
the degree-1 identity of the same edge sets, since every edge appears once per
direction on both sides (self-loops included, see compute_path_identity).

Keys are direction sensitive by default; canonical_direction=True keys a path and its
reverse identically. No sentinel handling applies here: a side without paths gets a NaN
percentage, which callers check through PathIdentityReport.is_defined.
"""
# Standard library
import logging
from typing import Any, Iterable, Optional, Set, Tuple, Union

# Third-party
import networkx as nx
import numpy as np

# Config imports (direct)
from netcompare.utils.config import PATH_CONFIG

# Local
from netcompare.graph.builder import build_graph
from netcompare.graph.paths import enumerate_paths
from netcompare.utils.dataclasses import PathIdentityReport

logger = logging.getLogger(__name__)

GraphLike = Union[nx.Graph, Iterable[Any]]


def path_keys(
    graph: nx.Graph,
    length: int,
    canonical_direction: bool = False,
    max_paths: Optional[int] = None,
) -> Set[Tuple[str, ...]]:
    """Key set of all simple paths of exactly `length` edges."""
    paths = enumerate_paths(graph, length, max_paths=max_paths)
    if canonical_direction:
        return {p.undirected_key for p in paths}
    return {p.key for p in paths}


def _percentage(matched: int, total: int) -> float:
    return matched / total * 100 if total else np.nan


def _self_loops(graph: nx.Graph) -> Set[str]:
    return set(nx.nodes_with_selfloops(graph))


def compute_path_identity(
    graph_a: GraphLike,
    graph_b: GraphLike,
    length: int,
    canonical_direction: Optional[bool] = None,
    max_paths: Optional[int] = None,
) -> PathIdentityReport:
    """
    Path identity of two networks at one path length.

    At length 1 a self-loop counts as a degenerate path, once per traversal direction
    like any other edge (once with canonical_direction), so the result matches the
    edge identity of the same networks. Self-loops never occur in longer paths.

    Args:
        graph_a: Graph of network A, or its edge set / raw records
        graph_b: Graph of network B, or its edge set / raw records
        length: Path length in edges (>= 1)
        canonical_direction: Merge a path with its reverse (PATH_CONFIG default)
        max_paths: Enumeration cap per graph (PATH_CONFIG default)

    Returns:
        PathIdentityReport; percentages are NaN where a side has no paths

    Raises:
        ValueError: If length < 1
        RuntimeError: If enumeration exceeds max_paths
    """
    if canonical_direction is None:
        canonical_direction = PATH_CONFIG['canonical_direction']
    if not isinstance(graph_a, nx.Graph):
        graph_a = build_graph(graph_a)
    if not isinstance(graph_b, nx.Graph):
        graph_b = build_graph(graph_b)

    keys_a = path_keys(graph_a, length, canonical_direction, max_paths)
    keys_b = path_keys(graph_b, length, canonical_direction, max_paths)

    total_a, total_b = len(keys_a), len(keys_b)
    shared = len(keys_a & keys_b)
    if length == 1:
        weight = 1 if canonical_direction else 2
        loops_a, loops_b = _self_loops(graph_a), _self_loops(graph_b)
        total_a += weight * len(loops_a)
        total_b += weight * len(loops_b)
        shared += weight * len(loops_a & loops_b)

    report = PathIdentityReport(
        length=length,
        percent_a=_percentage(shared, total_a),
        percent_b=_percentage(shared, total_b),
        paths_a=total_a,
        paths_b=total_b,
        matched_a=shared,
        matched_b=shared,
    )
    logger.debug(
        f"Path identity d={length}: {total_a} paths in A, {total_b} in B, {shared} shared"
    )
    return report
