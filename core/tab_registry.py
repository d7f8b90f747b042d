"""
TabRegistry — Root Destination to Unit Lookup

Built once from the configured graphs, read-only afterwards.
"""

from typing import Iterable, Iterator, Tuple

from core.errors import ConfigurationMismatchError, UnknownDestinationError
from core.nav_unit import NavigationUnit


class TabRegistry:
    """
    Maps each graph's root destination id to its tab tag, and each tag to
    the NavigationUnit hosting that graph. Registration order is preserved.
    """

    def __init__(self, pairs: Iterable[Tuple[int, NavigationUnit]]):
        self._tags: dict[int, str] = {}
        self._units: dict[str, NavigationUnit] = {}

        for destination_id, unit in pairs:
            if destination_id in self._tags:
                raise ConfigurationMismatchError(
                    f"Root destination {destination_id!r} is configured more than once"
                )
            if unit.tag in self._units:
                raise ConfigurationMismatchError(f"Tag {unit.tag!r} is used by more than one unit")
            self._tags[destination_id] = unit.tag
            self._units[unit.tag] = unit

    def lookup(self, destination_id: int) -> str:
        """Return the tag registered under a root destination id."""
        try:
            return self._tags[destination_id]
        except KeyError:
            raise UnknownDestinationError(destination_id) from None

    def unit(self, tag: str) -> NavigationUnit:
        try:
            return self._units[tag]
        except KeyError:
            raise UnknownDestinationError(tag) from None

    def resolve(self, destination_id: int) -> NavigationUnit:
        return self.unit(self.lookup(destination_id))

    def tags(self) -> Iterator[str]:
        return iter(self._units)

    def units(self) -> Iterator[NavigationUnit]:
        return iter(self._units.values())

    def __len__(self):
        return len(self._units)

    def __contains__(self, destination_id) -> bool:
        return destination_id in self._tags
