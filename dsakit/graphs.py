"""Undirected weighted graphs and Prim's minimum spanning tree."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SpanningTree:
    """A minimum spanning tree rooted at vertex 0.

    ``edges`` holds ``(parent, child, weight)`` triples ordered by child vertex.
    """

    total_weight: int
    edges: tuple[tuple[int, int, int], ...]


class Graph:
    """An undirected graph over vertices ``0 .. vertex_count - 1`` with weighted edges."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[dict[int, int]] = [{} for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, source: int, destination: int, weight: int) -> bool:
        """Add an undirected edge; return False if the edge already exists."""
        self._check(source)
        self._check(destination)
        if self.has_edge(source, destination):
            return False
        self._adjacency[source][destination] = weight
        self._adjacency[destination][source] = weight
        return True

    def has_edge(self, source: int, destination: int) -> bool:
        """Return True if ``source`` and ``destination`` are joined by an edge."""
        self._check(source)
        self._check(destination)
        return destination in self._adjacency[source]

    def neighbors(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs in the order the edges were added."""
        self._check(vertex)
        return list(self._adjacency[vertex].items())

    def minimum_spanning_tree(self) -> SpanningTree:
        """Return the minimum spanning tree grown from vertex 0 by Prim's algorithm.

        Raises ValueError if the graph is not connected.
        """
        count = self.vertex_count
        if count == 0:
            return SpanningTree(0, ())
        key: list[float] = [math.inf] * count
        parent: list[int | None] = [None] * count
        done = [False] * count
        key[0] = 0
        heap: list[tuple[float, int]] = [(0, 0)]
        while heap:
            _, u = heapq.heappop(heap)
            if done[u]:
                continue
            done[u] = True
            for v, weight in self._adjacency[u].items():
                if not done[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))
        if not all(done):
            raise ValueError("graph is not connected")
        edges = tuple(
            (parent[v], v, self._adjacency[v][parent[v]]) for v in range(1, count)
        )
        return SpanningTree(sum(weight for _, _, weight in edges), edges)