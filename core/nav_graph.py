"""
NavGraph — Per-Tab Graph Configuration and History

Handles:
- Static graph description (root id, start destination, destinations)
- Back stack of destinations inside one graph
- Destination change signals
"""

from dataclasses import dataclass, field
from typing import Tuple

from PySide6.QtCore import QObject, Signal, Slot, Property


@dataclass(frozen=True)
class NavGraph:
    """One independent navigation graph, hosted by one tab."""
    graph_id: int                 # Root destination id, matches the tab item id
    title: str
    start_destination: str
    destinations: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # The start destination is always reachable
        if self.start_destination not in self.destinations:
            object.__setattr__(
                self, "destinations", (self.start_destination,) + tuple(self.destinations)
            )


class GraphHistory(QObject):
    """
    Manages the destination history of a single graph.
    The start destination is the floor: navigate_up() never goes below it.
    """
    canGoUpChanged = Signal()
    destinationChanged = Signal(str)

    def __init__(self, graph: NavGraph, parent=None):
        super().__init__(parent)
        self._graph = graph
        self._back_stack: list[str] = []
        self._current = graph.start_destination

    @property
    def graph(self) -> NavGraph:
        return self._graph

    @Property(bool, notify=canGoUpChanged)
    def canGoUp(self) -> bool:
        return len(self._back_stack) > 0

    @Property(str, notify=destinationChanged)
    def currentDestination(self) -> str:
        return self._current

    @property
    def can_go_up(self) -> bool:
        return len(self._back_stack) > 0

    @property
    def current_destination(self) -> str:
        return self._current

    def history(self) -> tuple[str, ...]:
        """Full history including the current destination, oldest first."""
        return tuple(self._back_stack) + (self._current,)

    @Slot(str)
    def navigate(self, destination: str) -> None:
        """Navigates to a destination, pushing the current one to history."""
        if destination not in self._graph.destinations:
            raise ValueError(f"{destination!r} is not part of graph {self._graph.title!r}")
        if destination == self._current:
            return

        was_empty = not self._back_stack
        self._back_stack.append(self._current)
        if was_empty:
            self.canGoUpChanged.emit()

        self._current = destination
        self.destinationChanged.emit(destination)

    @Slot(result=bool)
    def navigate_up(self) -> bool:
        """
        Navigates to the previous destination.
        Returns False when already at the start of the history.
        """
        if not self._back_stack:
            return False

        self._current = self._back_stack.pop()
        if not self._back_stack:
            self.canGoUpChanged.emit()

        self.destinationChanged.emit(self._current)
        return True

    @Slot()
    def pop_to_start(self) -> None:
        """Drops all history and returns to the start destination."""
        if not self._back_stack:
            return

        self._back_stack.clear()
        self.canGoUpChanged.emit()

        self._current = self._graph.start_destination
        self.destinationChanged.emit(self._current)
