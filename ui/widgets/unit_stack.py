"""
UnitStack — Shared Container for Unit Views

QStackedWidget implementing the ViewContainer contract. Only the attached
unit's view is a page of the stack; detached views are taken out of the
stack and hidden, but kept alive together with their unit state.
"""

from PySide6.QtWidgets import QStackedWidget, QWidget
from PySide6.QtCore import Signal


class UnitStack(QStackedWidget):

    # Emitted after each commit with the tag of the primary unit
    primaryChanged = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._primary = None
        # tag -> view, for every unit ever attached (keeps detached views alive)
        self._retained: dict[str, QWidget] = {}

    @property
    def primary(self):
        return self._primary

    def attached_tags(self) -> list[str]:
        return [tag for tag, view in self._retained.items() if self.indexOf(view) >= 0]

    def commit(self, transaction) -> None:
        """Apply a validated VisibilityTransaction."""
        unit = transaction.attached

        # Updates are suspended so the intermediate states never paint
        self.setUpdatesEnabled(False)
        try:
            for detached in transaction.detached:
                view = self._retained.get(detached.tag)
                if view is not None and self.indexOf(view) >= 0:
                    self.removeWidget(view)
                    view.hide()

            view = unit.view()
            if view is None:
                # Unit without a view of its own gets a retained placeholder
                view = self._retained.get(unit.tag) or QWidget()
            self._retained[unit.tag] = view
            if self.indexOf(view) < 0:
                self.addWidget(view)
            self.setCurrentWidget(view)
            self._primary = transaction.primary
        finally:
            self.setUpdatesEnabled(True)

        self.primaryChanged.emit(unit.tag)
