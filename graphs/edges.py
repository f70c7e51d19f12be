"""
Weighted Edge Lists
===================
Edge type shared by the graph algorithms, plus validation and the
plain-text input format used by the shortest-path demo:

    V E
    src dest weight      (E lines)
    source
"""

from dataclasses import dataclass
from typing import Iterable, List, TextIO, Tuple

from common.errors import InvalidParameterError


@dataclass(frozen=True)
class Edge:
    src: int
    dest: int
    weight: int

    def sort_key(self) -> Tuple[int, int, int]:
        """Order by weight, ties broken by endpoints for deterministic output."""
        return (self.weight, self.src, self.dest)

    def __lt__(self, other: 'Edge') -> bool:
        return self.sort_key() < other.sort_key()


def make_edges(triples: Iterable[Tuple[int, int, int]]) -> List[Edge]:
    return [Edge(int(u), int(v), int(w)) for u, v, w in triples]


def validate_graph(num_vertices: int, edges: Iterable[Edge]) -> None:
    """Raise InvalidParameterError unless every endpoint is a valid vertex."""
    if isinstance(num_vertices, bool) or not isinstance(num_vertices, int) or num_vertices < 1:
        raise InvalidParameterError("num_vertices", num_vertices, "must be an integer >= 1")
    for edge in edges:
        for name, v in (("src", edge.src), ("dest", edge.dest)):
            if not 0 <= v < num_vertices:
                raise InvalidParameterError(
                    f"edge {name}", v, f"vertex must be in [0, {num_vertices})")


def validate_vertex(name: str, vertex: int, num_vertices: int) -> None:
    if isinstance(vertex, bool) or not isinstance(vertex, int) or not 0 <= vertex < num_vertices:
        raise InvalidParameterError(name, vertex, f"vertex must be in [0, {num_vertices})")


def read_graph(stream: TextIO) -> Tuple[int, List[Edge], int]:
    """
    Parse "V E", E "src dest weight" triples and a source vertex from a
    whitespace-separated text stream. Returns (num_vertices, edges, source).
    """
    tokens = stream.read().split()
    try:
        values = [int(t) for t in tokens]
    except ValueError as e:
        raise InvalidParameterError("graph input", tokens, "all tokens must be integers") from e

    if len(values) < 2:
        raise InvalidParameterError("graph input", values, "expected 'V E' header")
    num_vertices, num_edges = values[0], values[1]
    if num_edges < 0:
        raise InvalidParameterError("edge count", num_edges, "must be >= 0")

    expected = 2 + 3 * num_edges + 1
    if len(values) != expected:
        raise InvalidParameterError(
            "graph input", f"{len(values)} integers",
            f"expected {expected} for {num_edges} edges plus source")

    body = values[2:2 + 3 * num_edges]
    edges = make_edges(zip(body[0::3], body[1::3], body[2::3]))
    source = values[-1]

    validate_graph(num_vertices, edges)
    validate_vertex("source", source, num_vertices)
    return num_vertices, edges, source
