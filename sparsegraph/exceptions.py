# sparsegraph/exceptions.py

class InvalidArgumentError(ValueError):
    """Base class for every argument rejected by a graph operation."""
    pass

class InvalidPositionError(InvalidArgumentError):
    """Raised when a position is None, of the wrong kind, foreign or removed."""
    pass

class SelfLoopError(InvalidArgumentError):
    """Raised when an edge would start and end at the same vertex."""
    pass

class DuplicateEdgeError(InvalidArgumentError):
    """Raised when an edge between the same ordered pair already exists."""
    pass

class IncidentEdgesError(InvalidArgumentError):
    """Raised when removing a vertex that still has incident edges."""
    pass

class NullLabelError(InvalidArgumentError):
    """Raised when attaching None as a label."""
    pass
