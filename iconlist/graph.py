"""Directed weighted graphs: traversal, shortest paths and Mermaid export."""

import itertools
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

from iconlist.heap import Heap, HeapEntry

UNREACHABLE = 2**64 - 1
MERMAID_HORIZONTAL = "LR"
MERMAID_VERTICAL = "TD"

_vertex_ids = itertools.count()


class VertexStatus(Enum):
    """Progress of a vertex during a traversal."""

    UNVISITED = auto()
    VISITING = auto()
    VISITED = auto()


@dataclass(eq=False)
class Vertex:
    """A node of a graph; ``id`` is unique across all vertices created."""

    value: Any = None
    edges: list = field(default_factory=list, repr=False)
    id: int = field(default_factory=lambda: next(_vertex_ids))
    distance: int = 0
    discovery_time: int = 0
    finish_time: int = 0
    predecessor: Optional["Vertex"] = field(default=None, repr=False)
    status: VertexStatus = VertexStatus.UNVISITED

    def add_edge(self, edge):
        """Put ``edge`` at the front of this vertex's out-edges."""
        self.edges.insert(0, edge)

    def add_double_edge(self, edge):
        """Add ``edge`` here and the reverse edge to its destination."""
        reverse = Edge(edge.dest, edge.src, edge.weight)
        self.add_edge(edge)
        edge.dest.add_edge(reverse)

    def remove_edge(self, edge):
        """Drop the first out-edge leading to ``edge.dest``; tell whether one was found."""
        for index, existing in enumerate(self.edges):
            if existing.dest.id == edge.dest.id:
                del self.edges[index]
                return True
        return False


@dataclass(eq=False)
class Edge:
    """A weighted connection from ``src`` to ``dest``."""

    src: Vertex
    dest: Vertex
    weight: int = 0

    def __post_init__(self):
        if not 0 <= self.weight <= UNREACHABLE:
            raise ValueError(f"edge weight out of unsigned 64-bit range: {self.weight}")

    def __repr__(self):
        return f"Edge({self.src.id} -> {self.dest.id}, weight={self.weight})"


def edge_relax(src, dest, weight):
    """Shorten the distance to ``dest`` through ``src`` if that is better."""
    candidate = src.distance + weight
    if dest.distance <= candidate:
        return False
    dest.distance = candidate
    dest.predecessor = src
    return True


def build_path(dest):
    """Vertices from the first predecessor down to ``dest``."""
    path = []
    while dest is not None:
        path.append(dest)
        dest = dest.predecessor
    path.reverse()
    return path


class Graph:
    """A list of vertices, most recently added first.

    ``cmp`` compares vertex values and is used by :meth:`bfs` to find a target.
    """

    def __init__(self, cmp: Optional[Callable[[Any, Any], int]] = None):
        self.vertices = []
        self.cmp = cmp

    def __repr__(self):
        return f"Graph({len(self.vertices)} vertices)"

    def add_vertex(self, vertex):
        """Put ``vertex`` at the front of the vertex list."""
        self.vertices.insert(0, vertex)

    def remove_vertex(self, vertex):
        """Drop the vertex with the same id; tell whether one was found."""
        for index, existing in enumerate(self.vertices):
            if existing.id == vertex.id:
                del self.vertices[index]
                return True
        return False

    def init_single_source(self, src):
        """Reset traversal state of every vertex; ``src`` (if any) gets distance 0."""
        for vertex in self.vertices:
            vertex.distance = UNREACHABLE
            vertex.discovery_time = 0
            vertex.finish_time = 0
            vertex.status = VertexStatus.UNVISITED
            vertex.predecessor = None
        if src is not None:
            src.distance = 0

    def bfs(self, src, target=None):
        """Breadth-first search from ``src``.

        Stops at the first vertex whose value compares equal to ``target``
        and returns it; otherwise returns the last vertex explored.
        """
        self.init_single_source(src)
        if src is None:
            return None
        queue = deque([src])
        vertex = None
        while queue:
            vertex = queue.popleft()
            for edge in vertex.edges:
                dest = edge.dest
                if dest.status is VertexStatus.UNVISITED:
                    dest.status = VertexStatus.VISITING
                    dest.distance = vertex.distance + edge.weight
                    dest.predecessor = vertex
                    queue.append(dest)
            vertex.status = VertexStatus.VISITED
            if (
                self.cmp is not None
                and target is not None
                and self.cmp(vertex.value, target) == 0
            ):
                break
        return vertex

    def dfs(self):
        """Depth-first search over all vertices; returns them in finishing order."""
        self.init_single_source(None)
        clock = itertools.count()
        finished = []

        def visit(vertex):
            vertex.discovery_time = next(clock)
            vertex.status = VertexStatus.VISITING
            for edge in vertex.edges:
                if edge.dest.status is VertexStatus.UNVISITED:
                    visit(edge.dest)
            vertex.status = VertexStatus.VISITED
            vertex.finish_time = next(clock)
            finished.append(vertex)

        for vertex in self.vertices:
            if vertex.status is VertexStatus.UNVISITED:
                visit(vertex)
        return finished

    def dijkstra(self, src, dest):
        """Shortest path from ``src`` to ``dest`` as a list of vertices.

        When ``dest`` is unreachable the path is ``[dest]`` and its distance
        stays :data:`UNREACHABLE`.
        """
        if src is None or dest is None:
            raise ValueError("source and destination are required")
        self.init_single_source(src)
        heap = Heap(capacity=len(self.vertices))
        pending = {}
        for vertex in self.vertices:
            entry = HeapEntry(vertex.distance, vertex)
            heap.insert(entry)
            pending[vertex] = entry
        while len(heap):
            vertex = heap.poll_min().value
            pending.pop(vertex, None)
            for edge in vertex.edges:
                if edge_relax(vertex, edge.dest, edge.weight):
                    entry = pending.get(edge.dest)
                    if entry is not None:
                        heap.replace_key(entry, edge.dest.distance)
        return build_path(dest)

    def to_mermaid(self, direction=MERMAID_HORIZONTAL):
        """The graph as a Mermaid flowchart in a fenced block."""
        lines = [f"```mermaid\nflowchart {direction or MERMAID_HORIZONTAL}\n"]
        for vertex in self.vertices:
            if not vertex.edges:
                lines.append(f"{vertex.id}(({vertex.value}))\n")
                continue
            for edge in vertex.edges:
                lines.append(
                    f"{edge.src.id}(({edge.src.value})) -- {edge.weight} --> "
                    f"{edge.dest.id}(({edge.dest.value}))\n"
                )
        lines.append("```\n")
        return "".join(lines)

    def write_mermaid(self, filename, direction=MERMAID_HORIZONTAL):
        """Write :meth:`to_mermaid` output to ``filename``, replacing it."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.to_mermaid(direction))


def _compare_strings(a, b):
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return (a > b) - (a < b)


def example_graph():
    """A six-vertex sample graph over the values "a" to "f"."""
    graph = Graph(cmp=_compare_strings)
    v1, v2, v3, v4, v5, v6 = (Vertex(name) for name in "abcdef")
    for vertex in (v6, v5, v4, v3, v2, v1):
        graph.add_vertex(vertex)
    v5.add_edge(Edge(v5, v6, 2))
    v6.add_edge(Edge(v6, v1, 1))
    v6.add_edge(Edge(v6, v3, 3))
    v6.add_edge(Edge(v6, v5, 6))
    v4.add_edge(Edge(v4, v5, 3))
    v2.add_edge(Edge(v2, v5, 1))
    v2.add_edge(Edge(v2, v3, 4))
    v1.add_edge(Edge(v1, v4, 1))
    v1.add_edge(Edge(v1, v2, 2))
    return graph