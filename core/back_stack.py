"""
BackStack — Cross-Tab Visit History

Ordered LIFO record of tab tags, most recently selected on top.
Records visits, not membership: the same tag may appear many times.
Owned by exactly one NavigationController.
"""

import logging

from core.errors import EmptyStackError

log = logging.getLogger(__name__)


class BackStack:
    def __init__(self):
        self._entries: list[str] = []

    def push(self, tag: str) -> None:
        self._entries.append(tag)
        log.debug("[Stack] push %s -> %s", tag, self._entries)

    def pop(self) -> None:
        """Remove and discard the top entry."""
        if not self._entries:
            raise EmptyStackError("pop() on an empty back stack")
        tag = self._entries.pop()
        log.debug("[Stack] pop %s -> %s", tag, self._entries)

    def peek(self) -> str:
        if not self._entries:
            raise EmptyStackError("peek() on an empty back stack")
        return self._entries[-1]

    def size(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[str, ...]:
        """Snapshot, bottom to top."""
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"BackStack({self._entries!r})"
