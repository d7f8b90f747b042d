"""
NavigationController — Multi-Graph Tab Navigation

Keeps one navigation graph per tab, shows exactly one of them at a time and
routes the back gesture:
1. back inside the active unit,
2. then to the previously visited tab,
3. then out of the host.

Wiring (done by Builder.build()):
    selector "selected"   -> on_item_selected(item_id) -> bool
    selector "reselected" -> on_item_reselected(item_id)
    host back gesture     -> on_back_pressed() -> bool
"""

import logging
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional, Sequence

from PySide6.QtCore import QObject, Signal, Property

from core.back_stack import BackStack
from core.collaborators import NavigationHost, TabSelector, ViewContainer
from core.errors import ConfigurationMismatchError, MissingBindingError
from core.nav_graph import NavGraph
from core.nav_unit import GraphUnit, NavigationUnit
from core.tab_registry import TabRegistry
from core.visibility_transaction import VisibilityTransaction

log = logging.getLogger(__name__)

UnitFactory = Callable[[str, NavGraph], NavigationUnit]


def unit_tag(index: int) -> str:
    """Tag of the unit hosting the graph at position `index`."""
    return f"tab#{index}"


class NavigationController(QObject):
    """
    Owns the BackStack and TabRegistry for one host.
    Build instances through NavigationController.Builder.
    """
    # Emits only when the active unit actually changes
    currentUnitChanged = Signal(object)

    def __init__(self, selector: TabSelector, host: NavigationHost,
                 container: ViewContainer, parent=None):
        super().__init__(parent)
        self._selector = selector
        self._host = host
        self._container = container

        self._back_stack = BackStack()
        self._registry: Optional[TabRegistry] = None
        self._current: Optional[NavigationUnit] = None

        # Re-entrancy guard for the UI thread dispatch cycle
        self._dispatching = False
        self._fallback_item: Optional[int] = None

    # -------------------------------------------------------------------------
    # STATE (read-only outside the controller)
    # -------------------------------------------------------------------------

    @Property(object, notify=currentUnitChanged)
    def currentUnit(self):
        return self._current

    @property
    def current_unit(self) -> Optional[NavigationUnit]:
        return self._current

    @property
    def registry(self) -> TabRegistry:
        return self._registry

    def back_stack_entries(self) -> tuple:
        return self._back_stack.entries()

    def back_stack_size(self) -> int:
        return self._back_stack.size()

    # -------------------------------------------------------------------------
    # EVENTS
    # -------------------------------------------------------------------------

    def on_item_selected(self, item_id: int) -> bool:
        """
        A tab was selected. Returns False when the event was ignored, in which
        case the selector should keep its previous selection.
        """
        if self._host.is_state_saved():
            log.debug("[Nav] Ignoring selection of %s: host state is saved", item_id)
            return False

        if self._dispatching and item_id != self._fallback_item:
            log.warning("[Nav] Ignoring nested selection of %s", item_id)
            return False

        # Resolve first: an unknown id must not touch the stack or the container
        unit = self._registry.resolve(item_id)

        with self._dispatch():
            self._back_stack.push(unit.tag)
            (VisibilityTransaction(self._container, self._registry.units())
                .attach(unit)
                .set_primary(unit)
                .detach_others()
                .set_reordering_allowed(True)
                .commit())
            self._set_current(unit)

        log.debug("[Nav] Selected %s, stack=%s", unit.tag, self._back_stack.entries())
        return True

    def on_item_reselected(self, item_id: int) -> None:
        """The active tab was tapped again: take its graph back to the start."""
        unit = self._registry.resolve(item_id)
        unit.pop_to_start()
        log.debug("[Nav] Reselected %s, popped to start", unit.tag)

    def on_back_pressed(self) -> bool:
        """Handle the shared back gesture. Always consumes it unless re-entered."""
        if self._dispatching:
            log.warning("[Nav] Ignoring back press during another dispatch")
            return False

        with self._dispatch():
            unit = self._registry.unit(self._back_stack.peek())
            if unit.navigate_up():
                return True

            if self._back_stack.size() > 1:
                # Drop the exhausted tab and re-select the one below it.
                # The selection path pushes that tab again.
                self._back_stack.pop()
                previous = self._registry.unit(self._back_stack.peek())
                log.debug("[Nav] %s exhausted, falling back to %s", unit.tag, previous.tag)

                self._fallback_item = previous.root_destination_id
                try:
                    self._selector.force_select(previous.root_destination_id)
                finally:
                    self._fallback_item = None
            else:
                log.info("[Nav] Back stack exhausted at %s, finishing host", unit.tag)
                self._host.finish()

        return True

    # -------------------------------------------------------------------------
    # INTERNALS
    # -------------------------------------------------------------------------

    @contextmanager
    def _dispatch(self):
        outer = self._dispatching
        self._dispatching = True
        try:
            yield
        finally:
            self._dispatching = outer

    def _set_current(self, unit: NavigationUnit) -> None:
        if unit is self._current:
            return
        self._current = unit
        self.currentUnitChanged.emit(unit)

    def _create_units(self, graphs: Sequence[NavGraph], factory: UnitFactory,
                      existing: Dict[str, NavigationUnit]) -> None:
        pairs = []
        for index, graph in enumerate(graphs):
            tag = unit_tag(index)
            unit = existing.get(tag)
            if unit is None:
                unit = factory(tag, graph)
            if unit.root_destination_id != graph.graph_id:
                raise ConfigurationMismatchError(
                    f"Unit {tag} hosts destination {unit.root_destination_id}, "
                    f"expected {graph.graph_id}"
                )
            pairs.append((graph.graph_id, unit))

        self._registry = TabRegistry(pairs)

        selected = self._registry.resolve(self._selector.selected_item_id())
        self._back_stack.push(selected.tag)
        self._set_current(selected)
        (VisibilityTransaction(self._container, self._registry.units())
            .attach(selected)
            .set_primary(selected)
            .detach_others()
            .commit())

    def _connect(self) -> None:
        self._selector.set_item_selected_listener(self.on_item_selected)
        self._selector.set_item_reselected_listener(self.on_item_reselected)
        self._host.add_back_callback(self.on_back_pressed)

    # -------------------------------------------------------------------------
    # BUILDER
    # -------------------------------------------------------------------------

    class Builder:
        """
        Collects collaborators and graphs, validates them and builds a wired
        NavigationController.

            controller = (NavigationController.Builder()
                .bind_tab_selector(tab_bar)
                .bind_host(window)
                .bind_container(unit_stack)
                .bind_graphs(home, search, profile)
                .build())
        """

        def __init__(self):
            self._selector = None
            self._host = None
            self._container = None
            self._graphs: Optional[List[NavGraph]] = None
            self._factory: UnitFactory = GraphUnit
            self._existing: Dict[str, NavigationUnit] = {}
            self._parent = None

        def bind_tab_selector(self, selector: TabSelector) -> "NavigationController.Builder":
            self._selector = selector
            return self

        def bind_host(self, host: NavigationHost) -> "NavigationController.Builder":
            self._host = host
            return self

        def bind_container(self, container: ViewContainer) -> "NavigationController.Builder":
            self._container = container
            return self

        def bind_graphs(self, *graphs: NavGraph) -> "NavigationController.Builder":
            if self._selector is None:
                raise MissingBindingError("TabSelector")
            item_count = len(self._selector.item_ids())
            if len(graphs) != item_count:
                raise ConfigurationMismatchError(
                    f"{len(graphs)} graphs bound but the tab selector has {item_count} items"
                )
            self._graphs = list(graphs)
            return self

        def bind_unit_factory(self, factory: UnitFactory,
                              existing: Optional[Dict[str, NavigationUnit]] = None
                              ) -> "NavigationController.Builder":
            """
            factory(tag, graph) creates a unit; units already present in
            `existing` under the same tag are reused instead.
            """
            self._factory = factory
            self._existing = dict(existing or {})
            return self

        def bind_parent(self, parent) -> "NavigationController.Builder":
            self._parent = parent
            return self

        def _check_required_bound(self) -> None:
            if self._selector is None:
                raise MissingBindingError("TabSelector")
            if self._host is None:
                raise MissingBindingError("NavigationHost")
            if self._graphs is None:
                raise MissingBindingError("NavGraphs")
            if self._container is None:
                raise MissingBindingError("ViewContainer")

        def build(self) -> "NavigationController":
            self._check_required_bound()

            controller = NavigationController(
                self._selector, self._host, self._container, parent=self._parent
            )
            controller._create_units(self._graphs, self._factory, self._existing)
            controller._connect()
            log.info("[Nav] Controller built with %d graphs, active=%s",
                     len(self._graphs), controller.current_unit.tag)
            return controller
