"""
DestinationPage — View of one GraphUnit.

Shows the current destination and its history trail, with one button per
destination of the graph to navigate forward.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Slot


class DestinationPage(QWidget):

    def __init__(self, unit, parent=None):
        super().__init__(parent)
        self.unit = unit
        self.setObjectName(f"DestinationPage_{unit.tag}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)

        self.title_label = QLabel()
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("font-size: 18pt;")
        layout.addWidget(self.title_label, 1)

        self.trail_label = QLabel()
        self.trail_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.trail_label)

        buttons = QHBoxLayout()
        for destination in unit.graph.destinations:
            btn = QPushButton(destination)
            btn.clicked.connect(lambda checked=False, d=destination: unit.history.navigate(d))
            buttons.addWidget(btn)
        layout.addLayout(buttons)

        unit.history.destinationChanged.connect(self._on_destination_changed)
        self._on_destination_changed(unit.history.current_destination)

    @Slot(str)
    def _on_destination_changed(self, destination: str):
        self.title_label.setText(destination)
        self.trail_label.setText(" › ".join(self.unit.history.history()))
