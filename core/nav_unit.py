"""
NavigationUnit — One Tab's Graph Instance

The controller only sees the capability surface defined here:
identity, internal back, pop-to-start and a view handle.
Concrete variants are supplied by the host.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from core.nav_graph import GraphHistory, NavGraph


class NavigationUnit(ABC):

    @property
    @abstractmethod
    def tag(self) -> str:
        """Tab identifier, stable for the process lifetime."""

    @property
    @abstractmethod
    def root_destination_id(self) -> int:
        """Id of the graph root, equal to the tab item id that selects it."""

    @abstractmethod
    def navigate_up(self) -> bool:
        """Attempt to go back inside this unit. True if the attempt was consumed."""

    @abstractmethod
    def pop_to_start(self) -> None:
        """Discard internal history down to the start destination."""

    @abstractmethod
    def view(self) -> Any:
        """Handle of the view tree the container attaches or detaches."""

    def __repr__(self):
        return f"{type(self).__name__}({self.tag!r})"


class GraphUnit(NavigationUnit):
    """
    NavigationUnit backed by an in-process GraphHistory.

    The view is created lazily through view_factory(unit) the first time the
    container asks for it, then retained for the lifetime of the unit.
    """

    def __init__(self, tag: str, graph: NavGraph,
                 view_factory: Optional[Callable[["GraphUnit"], Any]] = None):
        self._tag = tag
        self.history = GraphHistory(graph)
        self._view_factory = view_factory
        self._view = None

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def graph(self) -> NavGraph:
        return self.history.graph

    @property
    def root_destination_id(self) -> int:
        return self.history.graph.graph_id

    def navigate_up(self) -> bool:
        return self.history.navigate_up()

    def pop_to_start(self) -> None:
        self.history.pop_to_start()

    def view(self):
        if self._view is None and self._view_factory is not None:
            self._view = self._view_factory(self)
        return self._view
