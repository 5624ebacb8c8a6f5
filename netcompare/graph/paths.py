# -*- coding: utf-8 -*-
"""
Simple-path enumeration over comparison graphs.

Paths are enumerated from every node as a start by depth-first search, never revisiting
a node within one path, and are kept in traversal order. On an undirected graph each
path is therefore found once from each end, i.e. a path and its reverse are both
present (a 4-node cycle holds 8 paths of length 3).

Enumeration is combinatorial in path length and density. The number of paths produced
for one graph is capped (PATH_CONFIG 'max_paths'); exceeding the cap raises
RuntimeError instead of returning a truncated set.
"""
# Standard library
import logging
from typing import Iterator, List, Optional, Tuple

# Third-party
import networkx as nx

# Config imports (direct)
from netcompare.utils.config import PATH_CONFIG

# Dataclass imports (direct)
from netcompare.utils.dataclasses import Path

logger = logging.getLogger(__name__)


def _walk(graph: nx.Graph, start: str, max_edges: int) -> Iterator[Tuple[str, ...]]:
    """Yield every simple path from start with 1..max_edges edges."""
    visited = [start]
    on_path = {start}
    stack = [iter(sorted(graph[start]))]

    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            on_path.discard(visited.pop())
            continue
        if child in on_path:
            continue

        visited.append(child)
        on_path.add(child)
        yield tuple(visited)

        if len(visited) - 1 < max_edges:
            stack.append(iter(sorted(graph[child])))
        else:
            on_path.discard(visited.pop())


def iter_simple_paths(graph: nx.Graph, max_edges: int) -> Iterator[Path]:
    """
    Yield all simple paths with at most max_edges edges, from every start node.

    Args:
        graph: Undirected graph
        max_edges: Length cutoff in edges (>= 1)
    """
    if max_edges < 1:
        raise ValueError(f"Path length cutoff must be >= 1, got {max_edges}")
    for start in sorted(graph.nodes):
        for nodes in _walk(graph, start, max_edges):
            yield Path(nodes)


def enumerate_paths(
    graph: nx.Graph,
    length: int,
    max_paths: Optional[int] = None,
) -> List[Path]:
    """
    All simple paths of exactly `length` edges (length + 1 nodes).

    Shorter branches met during the search are discarded.

    Args:
        graph: Undirected graph
        length: Path length in edges (>= 1)
        max_paths: Cap on retained paths (PATH_CONFIG default)

    Returns:
        Paths in traversal order, both directions included

    Raises:
        ValueError: If length < 1
        RuntimeError: If more than max_paths paths exist
    """
    if max_paths is None:
        max_paths = PATH_CONFIG['max_paths']

    paths = []
    for path in iter_simple_paths(graph, length):
        if path.length != length:
            continue
        paths.append(path)
        if len(paths) > max_paths:
            raise RuntimeError(
                f"Path enumeration exceeded {max_paths} paths at length {length} "
                f"({graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges); "
                f"lower the length or raise max_paths"
            )

    logger.debug(f"Enumerated {len(paths)} paths of length {length}")
    return paths


def longest_path_nodes(
    graph: nx.Graph,
    cutoff: int,
    max_paths: Optional[int] = None,
) -> int:
    """
    Node count of the longest simple path with at most `cutoff` edges.

    Every path walked counts against max_paths (PATH_CONFIG default), whatever its
    length. Returns 0 for a graph without edges.

    Raises:
        ValueError: If cutoff < 1
        RuntimeError: If more than max_paths paths are walked before the search ends
    """
    if cutoff < 1:
        raise ValueError(f"Path length cutoff must be >= 1, got {cutoff}")
    if max_paths is None:
        max_paths = PATH_CONFIG['max_paths']

    longest = 0
    walked = 0
    for start in sorted(graph.nodes):
        for nodes in _walk(graph, start, cutoff):
            walked += 1
            if walked > max_paths:
                raise RuntimeError(
                    f"Longest-path search exceeded {max_paths} paths with cutoff {cutoff} "
                    f"({graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges); "
                    f"lower the length or raise max_paths"
                )
            if len(nodes) > longest:
                longest = len(nodes)
                if longest == cutoff + 1:
                    return longest
    return longest
