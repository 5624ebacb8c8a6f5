# -*- coding: utf-8 -*-
"""
Degree-conditioned identity curve.

For every degree value i from 1 to the largest degree seen in either network, both
networks are restricted to the edges touching at least one node of degree i, and the
degree-1 identity of those restricted edge sets is recorded at position i. The
restriction is an edge neighborhood, not an induced subgraph: an edge qualifies as soon
as one endpoint has degree i.

Every slot is preallocated with a non-zero placeholder (TABLE_CONFIG
'degree_slot_default') and flagged DEFAULT until it is written. When one network has no
node of degree i the identity report carries sentinels; the row keeps the placeholder
values, is flagged NOT_APPLICABLE and records the sentinels, so consumers can tell
"no node of this degree" apart from a computed 0%.
"""
# Standard library
import logging
from typing import Any, Iterable, Optional

# Third-party
from tqdm import tqdm

# Config imports (direct)
from netcompare.utils.config import TABLE_CONFIG

# Local
from netcompare.analysis.identity import compute_identity
from netcompare.graph.canonicalizer import canonicalize_edges, edges_touching
from netcompare.graph.degree import profile_degrees
from netcompare.utils.dataclasses import (
    DegreeIdentityCurve,
    DegreeIdentityRow,
    DegreeTable,
    Provenance,
)

logger = logging.getLogger(__name__)


def compute_degree_identity(
    edges_a: Iterable[Any],
    edges_b: Iterable[Any],
    degrees_a: Optional[DegreeTable] = None,
    degrees_b: Optional[DegreeTable] = None,
    slot_default: Optional[float] = None,
    show_progress: bool = False,
) -> DegreeIdentityCurve:
    """
    Build the degree-vs-identity table.

    Args:
        edges_a: Edge set or raw records of network A
        edges_b: Edge set or raw records of network B
        degrees_a: Precomputed degree table of A (computed if omitted)
        degrees_b: Precomputed degree table of B (computed if omitted)
        slot_default: Placeholder for unwritten slots (TABLE_CONFIG default)
        show_progress: Show a tqdm bar over degree values

    Returns:
        DegreeIdentityCurve with one row per degree 1..max degree (empty if both
        networks are empty)
    """
    edges_a = canonicalize_edges(edges_a)
    edges_b = canonicalize_edges(edges_b)
    if degrees_a is None:
        degrees_a = profile_degrees(edges_a)
    if degrees_b is None:
        degrees_b = profile_degrees(edges_b)
    if slot_default is None:
        slot_default = TABLE_CONFIG['degree_slot_default']

    max_degree = max(degrees_a.max_degree, degrees_b.max_degree)
    rows = [
        DegreeIdentityRow(i, slot_default, slot_default, Provenance.DEFAULT)
        for i in range(1, max_degree + 1)
    ]

    for row in tqdm(rows, desc="Degree identity", disable=not show_progress):
        subset_a = edges_touching(edges_a, degrees_a.nodes_with_degree(row.degree))
        subset_b = edges_touching(edges_b, degrees_b.nodes_with_degree(row.degree))
        report = compute_identity(subset_a, subset_b)

        if report.is_computed:
            row.percent_a = report.percent_a
            row.percent_b = report.percent_b
            row.provenance = Provenance.COMPUTED
        else:
            row.sentinel_a = report.percent_a
            row.sentinel_b = report.percent_b
            row.provenance = Provenance.NOT_APPLICABLE

    curve = DegreeIdentityCurve(rows)
    not_applicable = sum(1 for r in rows if r.provenance is Provenance.NOT_APPLICABLE)
    logger.info(
        f"Degree identity: {len(rows)} degrees, {not_applicable} not applicable"
    )
    return curve
