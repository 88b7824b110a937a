"""
    Position model - opaque handle to an element stored in a graph.
"""
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class Position(Generic[T]):
    """
        Base class for vertex and edge positions.

        A position holds one element, an optional label and a reference
        to the graph that created it. Only that graph accepts the position;
        the reference is dropped when the element is removed, after which
        no graph accepts it again.

        Positions compare by identity: two positions holding equal
        elements are still distinct.
    """

    def __init__(self, value: T):
        self._value: Optional[T] = value
        self._owner: Any = None  # set by the graph on insert
        self._label: Any = None

    def get(self) -> Optional[T]:
        """Get the stored element (None once removed)"""
        return self._value

    def put(self, value: T) -> None:
        """Replace the stored element"""
        self._value = value

    def is_live(self) -> bool:
        """Check if the position still belongs to a graph"""
        return self._owner is not None

    def _release(self) -> None:
        """Clear element, label and owner; the position is dead afterwards."""
        self._value = None
        self._label = None
        self._owner = None

    def __repr__(self) -> str:
        state = "live" if self.is_live() else "removed"
        return f"{type(self).__name__}({self._value!r}, {state})"
