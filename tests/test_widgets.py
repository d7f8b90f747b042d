"""
Offscreen tests for the PySide6 host: tab bar, unit stack and main window.
"""

import pytest
from PySide6.QtCore import QSettings

from core.nav_graph import NavGraph
from core.nav_unit import GraphUnit
from ui.main_window import MainWindow
from ui.models.shortcuts import Shortcuts
from ui.widgets.bottom_tab_bar import BottomTabBar
from ui.widgets.destination_page import DestinationPage
from ui.widgets.unit_stack import UnitStack
from core.visibility_transaction import VisibilityTransaction


GRAPHS = (
    NavGraph(1, "Home", "feed", ("feed", "article")),
    NavGraph(2, "Search", "query", ("query", "results")),
    NavGraph(3, "Profile", "overview", ("overview", "settings")),
)


# -----------------------------------------------------------------------------
# BottomTabBar
# -----------------------------------------------------------------------------

@pytest.fixture
def tab_bar():
    bar = BottomTabBar()
    for graph in GRAPHS:
        bar.add_item(graph.graph_id, graph.title)
    return bar


def test_tab_bar_first_item_selected(tab_bar):
    assert tab_bar.item_ids() == [1, 2, 3]
    assert tab_bar.selected_item_id() == 1
    assert tab_bar.button(1).isChecked()
    assert not tab_bar.button(2).isChecked()


def test_tab_bar_click_routes_to_listeners(tab_bar):
    selected, reselected = [], []
    tab_bar.set_item_selected_listener(lambda i: selected.append(i) or True)
    tab_bar.set_item_reselected_listener(reselected.append)

    tab_bar.button(2).click()
    tab_bar.button(2).click()
    assert selected == [2]
    assert reselected == [2]
    assert tab_bar.selected_item_id() == 2
    assert tab_bar.button(2).isChecked()
    assert not tab_bar.button(1).isChecked()


def test_tab_bar_refused_selection_keeps_previous(tab_bar):
    tab_bar.set_item_selected_listener(lambda i: False)
    tab_bar.button(3).click()
    assert tab_bar.selected_item_id() == 1
    assert tab_bar.button(1).isChecked()
    assert not tab_bar.button(3).isChecked()


def test_tab_bar_duplicate_item(tab_bar):
    with pytest.raises(ValueError):
        tab_bar.add_item(1, "Again")


# -----------------------------------------------------------------------------
# UnitStack
# -----------------------------------------------------------------------------

def test_unit_stack_keeps_detached_views_alive():
    units = [GraphUnit(f"tab#{i}", g, view_factory=DestinationPage) for i, g in enumerate(GRAPHS)]
    stack = UnitStack()

    def show(unit):
        (VisibilityTransaction(stack, units)
            .attach(unit).set_primary(unit).detach_others().commit())

    show(units[0])
    first_view = units[0].view()
    assert stack.count() == 1
    assert stack.currentWidget() is first_view
    assert stack.attached_tags() == ["tab#0"]

    show(units[1])
    assert stack.count() == 1
    assert stack.attached_tags() == ["tab#1"]
    assert stack.primary is units[1]

    show(units[0])
    assert stack.currentWidget() is first_view


# -----------------------------------------------------------------------------
# MainWindow
# -----------------------------------------------------------------------------

@pytest.fixture
def window(tmp_path):
    shortcuts = Shortcuts(settings=QSettings(str(tmp_path / "s.ini"), QSettings.IniFormat))
    win = MainWindow(GRAPHS, shortcuts=shortcuts)
    yield win
    win.deleteLater()


def test_window_starts_on_first_tab(window):
    assert window.controller.current_unit.tag == "tab#0"
    assert window.address_label.text() == "Home / feed"
    assert window.unit_stack.attached_tags() == ["tab#0"]


def test_window_start_id(tmp_path):
    shortcuts = Shortcuts(settings=QSettings(str(tmp_path / "s.ini"), QSettings.IniFormat))
    win = MainWindow(GRAPHS, start_id=3, shortcuts=shortcuts)
    assert win.controller.current_unit.tag == "tab#2"
    assert win.tab_bar.selected_item_id() == 3
    win.deleteLater()


def test_window_tab_switch_and_back(window):
    finished = []
    window.finished.connect(lambda: finished.append(True))

    window.tab_bar.button(2).click()
    unit = window.controller.current_unit
    unit.history.navigate("results")
    assert window.address_label.text() == "Search / results"

    assert window.handle_back() is True              # inside Search
    assert window.address_label.text() == "Search / query"

    assert window.handle_back() is True              # back to Home
    assert window.tab_bar.selected_item_id() == 1
    assert window.unit_stack.attached_tags() == ["tab#0"]
    assert window.controller.back_stack_entries() == ("tab#0", "tab#0")

    window.handle_back()                              # Home re-selected: reselect, no push
    assert window.controller.back_stack_entries() == ("tab#0",)
    window.handle_back()
    assert finished == [True]


def test_window_reselect_goes_to_start(window):
    unit = window.controller.current_unit
    unit.history.navigate("article")
    window.tab_bar.button(1).click()
    assert unit.history.current_destination == "feed"
    assert window.controller.back_stack_entries() == ("tab#0",)


def test_window_refuses_selection_after_state_saved(window):
    window.set_state_saved(True)
    window.tab_bar.button(3).click()
    assert window.tab_bar.selected_item_id() == 1
    assert window.controller.current_unit.tag == "tab#0"


def test_window_cycle_tabs(window):
    window._cycle_tab(-1)
    assert window.tab_bar.selected_item_id() == 3
    window._cycle_tab(1)
    assert window.tab_bar.selected_item_id() == 1
