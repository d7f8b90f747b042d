"""
Shortcuts Model — Navigation Keyboard Configuration

Features:
- Pure data model (No QAction/QWidget logic)
- QSettings persistence of key bindings only (never navigation state)
- Enum-based type safety
- Conflict detection
"""

from PySide6.QtCore import QObject, Signal, QSettings
from enum import Enum, auto
from typing import Dict, Optional


class ShortcutAction(Enum):
    """All available shortcut actions."""
    BACK = auto()           # Shared back gesture
    GO_TO_START = auto()    # Same as reselecting the active tab
    NEXT_TAB = auto()
    PREV_TAB = auto()


DEFAULT_SHORTCUTS: Dict[ShortcutAction, str] = {
    ShortcutAction.BACK: "Alt+Left",
    ShortcutAction.GO_TO_START: "Alt+Home",
    ShortcutAction.NEXT_TAB: "Ctrl+Tab",
    ShortcutAction.PREV_TAB: "Ctrl+Shift+Tab",
}


class Shortcuts(QObject):
    """
    Manages persistence and lookup for keyboard shortcuts.
    Pure Data model: Does NOT create QActions or UI elements.
    """

    # Emitted when configuration changes
    configChanged = Signal()

    def __init__(self, parent=None, settings: Optional[QSettings] = None):
        super().__init__(parent)
        self._shortcuts: Dict[ShortcutAction, str] = DEFAULT_SHORTCUTS.copy()
        self._settings = settings if settings is not None else QSettings("Tabstack", "Shortcuts")
        self.load()

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def get(self, action: ShortcutAction) -> str:
        """Get the current key sequence for an action."""
        return self._shortcuts.get(action, "")

    def set(self, action: ShortcutAction, key_sequence: str):
        """Change a shortcut's key binding."""
        self._shortcuts[action] = key_sequence
        self.save()
        self.configChanged.emit()

    def reset(self, action: ShortcutAction = None):
        """Reset to defaults."""
        if action:
            self.set(action, DEFAULT_SHORTCUTS.get(action, ""))
        else:
            self._shortcuts = DEFAULT_SHORTCUTS.copy()
            self.save()
            self.configChanged.emit()

    def save(self):
        """Persist current shortcuts to QSettings."""
        self._settings.beginGroup("KeyBindings")
        for action, key in self._shortcuts.items():
            self._settings.setValue(action.name, key)
        self._settings.endGroup()
        self._settings.sync()

    def load(self):
        """Load shortcuts from QSettings."""
        self._settings.beginGroup("KeyBindings")
        for key_name in self._settings.childKeys():
            try:
                action = ShortcutAction[key_name]
            except KeyError:
                continue  # Stale key in settings
            sequence = self._settings.value(key_name)
            # Allow empty strings (unbound)
            if sequence is not None:
                self._shortcuts[action] = str(sequence)
        self._settings.endGroup()

    def get_conflicts(self) -> Dict[str, list]:
        """Find key sequences assigned to multiple actions."""
        reverse_map: Dict[str, list] = {}
        for action, key in self._shortcuts.items():
            if key:
                reverse_map.setdefault(key, []).append(action)
        return {key: actions for key, actions in reverse_map.items() if len(actions) > 1}
