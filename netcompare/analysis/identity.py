# -*- coding: utf-8 -*-
"""
Degree-1 identity between two networks.

The identity percentage measures how much of one network's structure the other
reproduces. Each network is used once as the reference denominator, so the two values
differ whenever the networks differ in size. This is a per-reference overlap ratio, not
a symmetric Jaccard index.

    percent_a = |A ∩ B| / |A| * 100     (A as reference)
    percent_b = |A ∩ B| / |B| * 100     (B as reference)

An empty input makes the ratio meaningless; instead of raising, the report carries
Sentinel markers (NO_NODE on the empty side, NOT_APPLICABLE on the other).

Examples:
    from netcompare.analysis.identity import compute_identity

    a = [("g1", "g2"), ("g2", "g3")]
    b = [("g1", "g2"), ("g2", "g3"), ("g3", "g4")]
    report = compute_identity(a, b)
    report.percent_a, round(report.percent_b, 1)   # (100.0, 66.7)
"""
# Standard library
import logging
from typing import AbstractSet, Any, Hashable, Iterable, Tuple

# Local
from netcompare.graph.canonicalizer import canonicalize_edges
from netcompare.utils.dataclasses import IdentityReport, Sentinel

logger = logging.getLogger(__name__)


def overlap_percentages(
    keys_a: AbstractSet[Hashable],
    keys_b: AbstractSet[Hashable],
) -> Tuple[float, float, int, int]:
    """
    Per-reference overlap of two non-empty key sets.

    Returns:
        (percent_a, percent_b, matched_a, matched_b) where matched_a counts keys of B
        found in A and matched_b counts keys of A found in B
    """
    diff_a = keys_b - keys_a          # Keys of B missing from A
    diff_b = keys_a - keys_b          # Keys of A missing from B
    matched_a = len(keys_b) - len(diff_a)
    matched_b = len(keys_a) - len(diff_b)
    return (
        matched_a / len(keys_a) * 100,
        matched_b / len(keys_b) * 100,
        matched_a,
        matched_b,
    )


def compute_identity(edges_a: Iterable[Any], edges_b: Iterable[Any]) -> IdentityReport:
    """
    Degree-1 identity of two edge sets.

    Args:
        edges_a: Edge set or raw records of network A
        edges_b: Edge set or raw records of network B

    Returns:
        IdentityReport; sentinel pair when either side is empty
    """
    edges_a = canonicalize_edges(edges_a)
    edges_b = canonicalize_edges(edges_b)

    if not edges_a:
        return IdentityReport(Sentinel.NO_NODE, Sentinel.NOT_APPLICABLE)
    if not edges_b:
        return IdentityReport(Sentinel.NOT_APPLICABLE, Sentinel.NO_NODE)

    percent_a, percent_b, matched, _ = overlap_percentages(edges_a, edges_b)
    logger.debug(
        f"Identity: {matched} shared edges ({len(edges_a)} in A, {len(edges_b)} in B) "
        f"-> {percent_a:.1f}% / {percent_b:.1f}%"
    )
    return IdentityReport(percent_a, percent_b, matched=matched)
