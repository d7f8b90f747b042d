"""
Navigation error taxonomy.

Every error here is a programming or configuration fault. Runtime conditions
such as a selection arriving while the host state is saved, or the back stack
running out at the root, are not errors and never raise.
"""


class NavigationError(Exception):
    """Base class for all tab navigation faults."""


class EmptyStackError(NavigationError):
    """peek()/pop() on an empty BackStack."""


class UnknownDestinationError(NavigationError):
    """A root destination id or tag that was never registered."""

    def __init__(self, key):
        super().__init__(f"No navigation unit registered for {key!r}")
        self.key = key


class ConfigurationMismatchError(NavigationError):
    """Configured graphs do not line up with the selectable tabs."""


class MissingBindingError(NavigationError):
    """A required collaborator was not bound before build()."""

    def __init__(self, name: str):
        super().__init__(f"{name} must be bound!")
        self.name = name


class TransactionStateError(NavigationError):
    """A visibility transaction would leave other than one unit visible, or was reused."""
