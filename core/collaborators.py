"""
Collaborator contracts driven by the NavigationController.

The PySide6 implementations live in ui/ (BottomTabBar, UnitStack, MainWindow);
tests use in-memory fakes.
"""

from typing import Callable, Protocol, Sequence


class TabSelector(Protocol):
    """Selectable-tab widget: one item per configured graph."""

    def item_ids(self) -> Sequence[int]: ...

    def selected_item_id(self) -> int: ...

    def force_select(self, item_id: int) -> None:
        """Make item_id appear selected and fire the selected listener for it."""

    def set_item_selected_listener(self, listener: Callable[[int], bool]) -> None: ...

    def set_item_reselected_listener(self, listener: Callable[[int], None]) -> None: ...


class ViewContainer(Protocol):
    """Shared container that shows exactly one unit's view."""

    def commit(self, transaction) -> None:
        """Apply a validated VisibilityTransaction in one step."""


class NavigationHost(Protocol):
    """Window/activity that owns the controller."""

    def is_state_saved(self) -> bool:
        """True while committing a visibility change is unsafe."""

    def finish(self) -> None:
        """Terminate: the back gesture ran out of history."""

    def add_back_callback(self, callback: Callable[[], bool]) -> None: ...
