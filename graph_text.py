"""
Canonical text form of a graph.

A graph renders as ", "-separated entries ordered by vertex label. A vertex
without outgoing edges renders as "A:", every outgoing edge as "A-B(2)",
edges of one vertex ordered by destination label:

    A-B(2), A-C(1), B:, Z:

The same grammar is accepted as input, in any order and with loose spacing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import TYPE_CHECKING, List, Tuple

from errors import GraphFormatError

if TYPE_CHECKING:
    from graph import Graph, GraphView

# Labels may not contain whitespace or any of , : ( ) -
LABEL_PATTERN = r"[^\s,:()\-]+"
_LABEL_RE = re.compile(LABEL_PATTERN)
_EDGE_RE = re.compile(rf"^(?P<src>{LABEL_PATTERN})-(?P<dst>{LABEL_PATTERN})\((?P<weight>-?\d+)\)$")
_VERTEX_RE = re.compile(rf"^(?P<vertex>{LABEL_PATTERN}):$")


@dataclass
class ParsedGraph:
    """Tokens of a description, in input order."""

    vertices: List[str] = field(default_factory=list)
    edges: List[Tuple[str, str, int]] = field(default_factory=list)


def is_valid_label(label: object) -> bool:
    """True if label can be written and read back in the text form."""
    return isinstance(label, str) and _LABEL_RE.fullmatch(label) is not None


def format_graph(graph: GraphView) -> str:
    entries: List[str] = []
    for vertex in sorted(graph.vertices()):
        succ = sorted(graph.successors(vertex))
        if not succ:
            entries.append(f"{vertex}:")
            continue
        for dest in succ:
            entries.append(f"{vertex}-{dest}({graph.weight(vertex, dest)})")
    return ", ".join(entries)


def parse_tokens(description: str) -> ParsedGraph:
    """
    Split a description into isolated-vertex and edge tokens.

    Empty tokens (doubled or trailing commas) are ignored; anything else that
    is neither "label:" nor "src-dst(weight)" raises GraphFormatError. Weights
    are not range-checked here, negative ones are left for the graph to reject.
    """
    parsed = ParsedGraph()
    for raw in description.split(","):
        token = raw.strip()
        if not token:
            continue
        m = _EDGE_RE.match(token)
        if m:
            parsed.edges.append((m.group("src"), m.group("dst"), int(m.group("weight"))))
            continue
        m = _VERTEX_RE.match(token)
        if m:
            parsed.vertices.append(m.group("vertex"))
            continue
        raise GraphFormatError(f"Malformed graph token: {token!r}")
    return parsed


def populate_graph(graph: Graph, description: str) -> None:
    """
    Add everything a description lists through the graph's public mutators.

    The whole description is tokenized before the graph is touched, so a
    syntax error leaves the graph unchanged.
    """
    parsed = parse_tokens(description)
    for vertex in parsed.vertices:
        graph.add_vertex(vertex)
    for src, dst, weight in parsed.edges:
        graph.add_edge(src, dst, weight)
