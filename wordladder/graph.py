from __future__ import annotations
import logging
import threading
import time
from typing import Dict, Iterable, List, Set, Tuple

from .dictionary import WordIndex

logger = logging.getLogger(__name__)

Graph = Dict[str, Set[str]]

def is_adjacent(a: str, b: str) -> bool:
    """True if ``a`` and ``b`` have the same length and differ in exactly one position."""
    if len(a) != len(b):
        return False
    diff = 0
    for x, y in zip(a.lower(), b.lower()):
        if x != y:
            diff += 1
            if diff > 1:
                return False
    return diff == 1

def build_graph(words: Iterable[str]) -> Graph:
    """Adjacency graph over ``words``.

    Every word becomes a node, including words with no neighbours. Words are
    grouped by the letters left after dropping one position
    (``cat`` -> ``(0, at)``, ``(1, ct)``, ``(2, ca)``) and
    only words sharing a pattern are linked, which gives the same edges as
    comparing every pair.
    """
    graph: Graph = {}
    patterns: Dict[Tuple[int, str], List[str]] = {}
    for word in words:
        w = word.lower()
        if w in graph:
            continue
        graph[w] = set()
        for i in range(len(w)):
            patterns.setdefault((i, w[:i] + w[i + 1:]), []).append(w)
    for bucket in patterns.values():
        for i, a in enumerate(bucket):
            for b in bucket[i + 1:]:
                graph[a].add(b)
                graph[b].add(a)
    return graph

def is_reachable(graph: Graph, start: str, end: str) -> bool:
    """Walk outward from ``start`` until ``end`` shows up as a neighbour."""
    checked = [start]
    seen = {start}
    i = 0
    while i < len(checked):
        for next_word in sorted(graph.get(checked[i], ())):
            if next_word == end:
                return True
            if next_word not in seen:
                seen.add(next_word)
                checked.append(next_word)
        i += 1
    return False

class GraphCache:
    """Per-length adjacency graphs, built on first use and kept for good."""

    def __init__(self, index: WordIndex):
        self.index = index
        self._graphs: Dict[int, Graph] = {}
        self._lock = threading.Lock()

    def graph_for(self, length: int) -> Graph:
        graph = self._graphs.get(length)
        if graph is not None:
            return graph
        with self._lock:
            graph = self._graphs.get(length)
            if graph is None:
                t0 = time.perf_counter()
                graph = build_graph(self.index.bucket(length))
                self._graphs[length] = graph
                edges = sum(len(n) for n in graph.values()) // 2
                logger.info("Built %s-letter graph: %s words, %s edges in %.3fs",
                            length, len(graph), edges, time.perf_counter() - t0)
        return graph

    def cached_lengths(self) -> List[int]:
        return sorted(self._graphs)

    def adjacent(self, a: str, b: str) -> bool:
        a = a.lower()
        b = b.lower()
        graph = self._graphs.get(len(a))
        if graph is not None and b in graph.get(a, ()):
            return True
        return is_adjacent(a, b)

    def is_possible(self, start: str, end: str) -> bool:
        if len(start) != len(end):
            return False
        graph = self.graph_for(len(start))
        return is_reachable(graph, start.lower(), end.lower())
