from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel, QToolBar
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtCore import Qt, Signal, Slot

import logging
from typing import Callable, Optional, Sequence

# Core Logic
from core.nav_graph import NavGraph
from core.nav_unit import GraphUnit
from core.navigation_controller import NavigationController

# UI Components
from ui.models.shortcuts import Shortcuts, ShortcutAction
from ui.widgets.bottom_tab_bar import BottomTabBar
from ui.widgets.destination_page import DestinationPage
from ui.widgets.unit_stack import UnitStack

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Host window: one tab per NavGraph, a shared content area and an
    address label following the active unit.
    Implements the NavigationHost contract for the controller.
    """
    finished = Signal()

    def __init__(self, graphs: Sequence[NavGraph], start_id: Optional[int] = None,
                 shortcuts: Optional[Shortcuts] = None):
        super().__init__()
        self.setWindowTitle("Tabstack")
        self.resize(480, 720)

        self._state_saved = False
        self._back_callbacks: list[Callable[[], bool]] = []
        self._watched_unit = None

        self._setup_ui(graphs)
        if start_id is not None:
            # No listener bound yet: just moves the initial selection
            self.tab_bar.force_select(start_id)

        self.controller = (NavigationController.Builder()
            .bind_tab_selector(self.tab_bar)
            .bind_host(self)
            .bind_container(self.unit_stack)
            .bind_graphs(*graphs)
            .bind_unit_factory(lambda tag, graph: GraphUnit(tag, graph, view_factory=DestinationPage))
            .bind_parent(self)
            .build())

        self.controller.currentUnitChanged.connect(self._on_current_unit_changed)
        self._on_current_unit_changed(self.controller.current_unit)

        self.shortcuts = shortcuts if shortcuts is not None else Shortcuts(self)
        self._setup_actions()

    def _setup_ui(self, graphs):
        # Address bar (Top)
        self.address_label = QLabel()
        self.address_label.setObjectName("AddressBar")
        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        toolbar.addWidget(self.address_label)
        self.addToolBar(toolbar)

        # Central Layout
        central_widget = QWidget()
        central_layout = QVBoxLayout(central_widget)
        central_layout.setContentsMargins(0, 0, 0, 0)
        central_layout.setSpacing(0)

        self.unit_stack = UnitStack()
        central_layout.addWidget(self.unit_stack, 1)

        # Tabs (Bottom)
        self.tab_bar = BottomTabBar()
        for graph in graphs:
            self.tab_bar.add_item(graph.graph_id, graph.title)
        central_layout.addWidget(self.tab_bar)

        self.setCentralWidget(central_widget)

    def _setup_actions(self):
        handlers = {
            ShortcutAction.BACK: self.handle_back,
            ShortcutAction.GO_TO_START: self._go_to_start,
            ShortcutAction.NEXT_TAB: lambda: self._cycle_tab(1),
            ShortcutAction.PREV_TAB: lambda: self._cycle_tab(-1),
        }
        self._actions: dict[ShortcutAction, QAction] = {}
        for action_enum, handler in handlers.items():
            action = QAction(self)
            action.setShortcut(QKeySequence(self.shortcuts.get(action_enum)))
            action.setShortcutContext(Qt.WindowShortcut)
            action.triggered.connect(lambda checked=False, h=handler: h())
            self.addAction(action)
            self._actions[action_enum] = action

        self.shortcuts.configChanged.connect(self._reload_shortcuts)

    @Slot()
    def _reload_shortcuts(self):
        for action_enum, action in self._actions.items():
            action.setShortcut(QKeySequence(self.shortcuts.get(action_enum)))

    # -------------------------------------------------------------------------
    # NavigationHost
    # -------------------------------------------------------------------------

    def is_state_saved(self) -> bool:
        return self._state_saved

    def finish(self):
        log.info("[Host] Finishing")
        self.finished.emit()
        self.close()

    def add_back_callback(self, callback: Callable[[], bool]):
        self._back_callbacks.append(callback)

    def handle_back(self) -> bool:
        """Dispatch the back gesture, most recently added callback first."""
        for callback in reversed(self._back_callbacks):
            if callback():
                return True
        return False

    def set_state_saved(self, saved: bool):
        self._state_saved = saved

    # -------------------------------------------------------------------------

    def _go_to_start(self):
        self.tab_bar.force_select(self.tab_bar.selected_item_id())

    def _cycle_tab(self, step: int):
        ids = self.tab_bar.item_ids()
        index = ids.index(self.tab_bar.selected_item_id())
        self.tab_bar.force_select(ids[(index + step) % len(ids)])

    @Slot(object)
    def _on_current_unit_changed(self, unit):
        if self._watched_unit is not None:
            self._watched_unit.history.destinationChanged.disconnect(self._update_address)
        self._watched_unit = unit
        unit.history.destinationChanged.connect(self._update_address)
        self._update_address()

    def _update_address(self, *_):
        unit = self._watched_unit
        self.address_label.setText(f"{unit.graph.title} / {unit.history.current_destination}")

    def mousePressEvent(self, event):
        # Mouse "back" side button acts as the back gesture
        if event.button() == Qt.BackButton:
            self.handle_back()
            event.accept()
            return
        super().mousePressEvent(event)

    def closeEvent(self, event):
        # From here on the window is tearing down; selections are refused
        self._state_saved = True
        super().closeEvent(event)
