import os
import sys

# Widgets must be creatable without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from PySide6.QtWidgets import QApplication

from core.nav_graph import NavGraph
from core.nav_unit import NavigationUnit
from core.navigation_controller import NavigationController


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


# -----------------------------------------------------------------------------
# Collaborator fakes
# -----------------------------------------------------------------------------

class FakeUnit(NavigationUnit):
    """Unit whose internal history is just a depth counter."""

    def __init__(self, tag, root_destination_id, depth=0):
        self._tag = tag
        self._root = root_destination_id
        self.depth = depth
        self.pop_to_start_calls = 0
        self._view = object()

    @property
    def tag(self):
        return self._tag

    @property
    def root_destination_id(self):
        return self._root

    def navigate_up(self):
        if self.depth > 0:
            self.depth -= 1
            return True
        return False

    def pop_to_start(self):
        self.pop_to_start_calls += 1
        self.depth = 0

    def view(self):
        return self._view


class FakeTabSelector:
    """Mirrors BottomTabBar: forcing the selected item is a reselect."""

    def __init__(self, ids, selected=None):
        self._ids = list(ids)
        self.selected = selected if selected is not None else self._ids[0]
        self.forced = []
        self._on_selected = None
        self._on_reselected = None

    def item_ids(self):
        return list(self._ids)

    def selected_item_id(self):
        return self.selected

    def set_item_selected_listener(self, listener):
        self._on_selected = listener

    def set_item_reselected_listener(self, listener):
        self._on_reselected = listener

    def force_select(self, item_id):
        self.forced.append(item_id)
        self.click(item_id)

    def click(self, item_id):
        if item_id == self.selected:
            self._on_reselected(item_id)
            return True
        if self._on_selected(item_id):
            self.selected = item_id
            return True
        return False


class FakeContainer:
    def __init__(self):
        self.attached = set()
        self.primary = None
        self.commits = []

    def commit(self, transaction):
        for unit in transaction.detached:
            self.attached.discard(unit.tag)
        self.attached.add(transaction.attached.tag)
        self.primary = transaction.primary
        self.commits.append(transaction)


class FakeHost:
    def __init__(self):
        self.state_saved = False
        self.finished = 0
        self._callbacks = []

    def is_state_saved(self):
        return self.state_saved

    def finish(self):
        self.finished += 1

    def add_back_callback(self, callback):
        self._callbacks.append(callback)

    def press_back(self):
        for callback in reversed(self._callbacks):
            if callback():
                return True
        return False


class Rig:
    """A built controller plus its fakes."""

    def __init__(self, ids=(1, 2, 3), selected=None, depths=None):
        depths = depths or {}
        self.selector = FakeTabSelector(ids, selected)
        self.container = FakeContainer()
        self.host = FakeHost()
        self.units = {}
        self.emitted = []

        def factory(tag, graph):
            unit = FakeUnit(tag, graph.graph_id, depths.get(graph.graph_id, 0))
            self.units[graph.graph_id] = unit
            return unit

        graphs = [NavGraph(i, f"Graph {i}", "start") for i in ids]
        self.controller = (NavigationController.Builder()
            .bind_tab_selector(self.selector)
            .bind_host(self.host)
            .bind_container(self.container)
            .bind_graphs(*graphs)
            .bind_unit_factory(factory)
            .build())
        self.controller.currentUnitChanged.connect(self.emitted.append)

    def stack(self):
        return self.controller.back_stack_entries()

    def tag(self, item_id):
        return self.units[item_id].tag


@pytest.fixture
def rig():
    return Rig()


@pytest.fixture
def make_rig():
    return Rig
