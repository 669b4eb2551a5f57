"""
Load a graph description from a text file.

File layout:

    # comment lines start with '#'
    1-3(5), 2-1(5), 2-3(5)
    4-10(1), 4-2(1)
    J:
    path: 5 7

Graph lines use the canonical grammar (see graph_text) and may be split
across lines freely. An optional "path: <source> <destination>" line names
the pair the file is meant to be queried with.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
import re

from errors import GraphFormatError
from graph import Graph, Vertex
from graph_text import LABEL_PATTERN

# Anything else, including an isolated vertex called "path", is graph grammar.
_PATH_DIRECTIVE_RE = re.compile(rf"^path:\s+(?P<source>{LABEL_PATTERN})\s+(?P<destination>{LABEL_PATTERN})$")


@dataclass(frozen=True)
class PathQuery:
    source: Vertex
    destination: Vertex


def import_graph(path: Union[str, Path], graph: Graph) -> Optional[PathQuery]:
    """
    Populate graph from the file at path.

    Returns the file's path query, or None if it has none.
    """
    path = Path(path)
    query: Optional[PathQuery] = None
    body: List[str] = []

    for lineno, raw in enumerate(path.read_text().splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = _PATH_DIRECTIVE_RE.match(line)
        if m:
            if query is not None:
                raise GraphFormatError(f"{path}:{lineno}: duplicate path directive")
            query = PathQuery(m.group("source"), m.group("destination"))
            continue
        body.append(line)

    # Lines are joined with commas so a line break always ends a token.
    graph.populate(", ".join(body))
    return query
