"""
Exception types raised by the graph toolkit.

All of them derive from ValueError: they signal a caller-supplied argument
that would break a graph invariant, and the caller can recover from them.
"""


class GraphError(ValueError):
    """Base class for graph contract violations."""


class InvalidEdgeError(GraphError):
    """Edge weight is negative or not an integer."""


class DuplicateEdgeError(GraphError):
    """An edge between the same ordered pair already exists."""


class EdgeNotFoundError(GraphError):
    """No edge exists between the given ordered pair."""


class VertexNotFoundError(GraphError):
    """The vertex is not part of the graph."""


class GraphFormatError(GraphError):
    """A textual graph description could not be parsed."""


class InvalidVertexError(GraphError):
    """Vertex label cannot be represented in the text form."""
