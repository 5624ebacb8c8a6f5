# -*- coding: utf-8 -*-
"""
Edge canonicalization for undirected network comparison.

Raw edge tables record each interaction as a (from, to) pair, but the networks compared
here are undirected: (g1, g2) and (g2, g1) describe the same edge. Canonicalization
orders the endpoints lexicographically and deduplicates, so that set operations on the
result compare structure rather than recording order.

Accepted record shapes: (from, to) tuples/lists, mappings with 'from'/'to' keys, and
Edge instances (already canonical; canonicalization is idempotent).

Examples:
    from netcompare.graph.canonicalizer import canonicalize_edges

    edges = canonicalize_edges([("g2", "g1"), ("g1", "g2"), ("g2", "g3")])
    len(edges)   # 2
"""
# Standard library
import logging
from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable

# Dataclass imports (direct)
from netcompare.utils.dataclasses import Edge

logger = logging.getLogger(__name__)

EdgeSet = FrozenSet[Edge]


def to_edge(record: Any) -> Edge:
    """
    Canonical Edge for one raw record.

    Raises:
        ValueError: If the record is not a pair or lacks 'from'/'to' fields
    """
    if isinstance(record, Edge):
        return Edge.of(record.a, record.b)
    if isinstance(record, Mapping):
        try:
            return Edge.of(record['from'], record['to'])
        except KeyError:
            raise ValueError(f"Edge record missing 'from'/'to' field: {record!r}")
    if isinstance(record, (tuple, list)) and len(record) == 2:
        return Edge.of(record[0], record[1])
    raise ValueError(f"Cannot interpret edge record: {record!r}")


def canonicalize_edges(records: Iterable[Any]) -> EdgeSet:
    """
    Normalize raw (from, to) records into a deduplicated edge set.

    Args:
        records: Iterable of raw edge records (see module docstring)

    Returns:
        Frozen set of canonical edges (empty for empty input)
    """
    raw_count = 0
    edges = set()
    for record in records:
        raw_count += 1
        edges.add(to_edge(record))

    if raw_count != len(edges):
        logger.debug(f"Canonicalized {raw_count} records into {len(edges)} edges")
    return frozenset(edges)


def edges_touching(edges: EdgeSet, nodes) -> EdgeSet:
    """Edges with at least one endpoint in nodes (edge neighborhood, not induced)."""
    nodes = set(nodes)
    return frozenset(e for e in edges if e.touches(nodes))
