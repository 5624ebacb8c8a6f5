# -*- coding: utf-8 -*-
"""
Degree profiling for comparison graphs.

Degree is the number of distinct canonical edges incident to a node. Because edges are
deduplicated before the graph is built, a node's degree equals the size of its
neighbor set, and the degrees of a graph sum to twice its edge count.
"""
# Standard library
import logging
from typing import Any, Iterable, Union

# Third-party
import networkx as nx

# Local
from netcompare.graph.builder import build_graph
from netcompare.utils.dataclasses import DegreeTable

logger = logging.getLogger(__name__)


def profile_degrees(source: Union[nx.Graph, Iterable[Any]]) -> DegreeTable:
    """
    Compute the degree of every node.

    Args:
        source: Graph from build_graph(), or an edge set / raw edge records

    Returns:
        DegreeTable with one entry per node
    """
    graph = source if isinstance(source, nx.Graph) else build_graph(source)
    table = DegreeTable({node: int(degree) for node, degree in graph.degree()})
    logger.debug(f"Profiled {len(table)} nodes, max degree {table.max_degree}")
    return table
