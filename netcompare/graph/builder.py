# -*- coding: utf-8 -*-
"""
Graph construction from canonical edge sets.

Builds an undirected networkx graph (node set + adjacency) from a canonical edge set.
Graphs are frozen after construction, so the cached instance returned for a given
edge set can be shared between analyzers without risk of mutation.

Examples:
    from netcompare.graph.builder import build_graph

    graph = build_graph([("g1", "g2"), ("g2", "g3")])
    sorted(graph["g2"])   # ['g1', 'g3']
"""
# Standard library
import logging
from functools import lru_cache
from typing import Any, Iterable

# Third-party
import networkx as nx

# Local
from netcompare.graph.canonicalizer import EdgeSet, canonicalize_edges
from netcompare.utils.dataclasses import Edge

logger = logging.getLogger(__name__)

GRAPH_CACHE_SIZE = 64


@lru_cache(maxsize=GRAPH_CACHE_SIZE)
def _build_frozen(edges: EdgeSet) -> nx.Graph:
    graph = nx.Graph()
    # Sorted insertion keeps node iteration order stable across runs
    graph.add_edges_from(e.key for e in sorted(edges))
    logger.debug(
        f"Built graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges"
    )
    return nx.freeze(graph)


def build_graph(edges: Iterable[Any]) -> nx.Graph:
    """
    Build a frozen undirected graph.

    Args:
        edges: Canonical edge set or raw edge records (canonicalized first)

    Returns:
        Frozen nx.Graph; empty for empty input
    """
    if not (isinstance(edges, frozenset) and all(isinstance(e, Edge) for e in edges)):
        edges = canonicalize_edges(edges)
    return _build_frozen(edges)


def clear_graph_cache() -> None:
    _build_frozen.cache_clear()
