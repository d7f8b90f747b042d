"""
BottomTabBar — Selectable Tab Row

One checkable button per configured graph. Implements the TabSelector
contract used by NavigationController:
- click on another item -> selected listener (may refuse)
- click on the checked item -> reselected listener
- force_select() behaves exactly like a click
"""

from typing import Callable, Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton, QSizePolicy
from PySide6.QtCore import Qt, Signal


class BottomTabBar(QWidget):

    # Emitted after the selection was accepted
    itemSelected = Signal(int)
    itemReselected = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(0)

        self._buttons: dict[int, QToolButton] = {}
        self._selected_id: Optional[int] = None
        self._selected_listener: Optional[Callable[[int], bool]] = None
        self._reselected_listener: Optional[Callable[[int], None]] = None

    def add_item(self, item_id: int, title: str) -> QToolButton:
        """Append a tab. The first item added starts out selected."""
        if item_id in self._buttons:
            raise ValueError(f"Duplicate tab item id {item_id}")

        btn = QToolButton(self)
        btn.setText(title)
        btn.setCheckable(True)
        btn.setAutoRaise(True)
        btn.setToolButtonStyle(Qt.ToolButtonTextOnly)
        btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        btn.clicked.connect(lambda checked=False, i=item_id: self._on_item_clicked(i))
        self.layout.addWidget(btn)
        self._buttons[item_id] = btn

        if self._selected_id is None:
            self._selected_id = item_id
        self._sync_checked()
        return btn

    # -------------------------------------------------------------------------
    # TabSelector
    # -------------------------------------------------------------------------

    def item_ids(self) -> list[int]:
        return list(self._buttons)

    def selected_item_id(self) -> Optional[int]:
        return self._selected_id

    def force_select(self, item_id: int) -> None:
        self._on_item_clicked(item_id)

    def set_item_selected_listener(self, listener: Callable[[int], bool]) -> None:
        self._selected_listener = listener

    def set_item_reselected_listener(self, listener: Callable[[int], None]) -> None:
        self._reselected_listener = listener

    # -------------------------------------------------------------------------

    def button(self, item_id: int) -> QToolButton:
        return self._buttons[item_id]

    def _on_item_clicked(self, item_id: int):
        if item_id not in self._buttons:
            raise KeyError(item_id)

        if item_id == self._selected_id:
            if self._reselected_listener is not None:
                self._reselected_listener(item_id)
            self.itemReselected.emit(item_id)
        else:
            accepted = self._selected_listener(item_id) if self._selected_listener else True
            if accepted:
                self._selected_id = item_id
                self.itemSelected.emit(item_id)

        # Clicking toggles the button itself; restore the real state
        self._sync_checked()

    def _sync_checked(self):
        for item_id, btn in self._buttons.items():
            btn.setChecked(item_id == self._selected_id)
