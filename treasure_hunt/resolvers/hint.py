"""
Precomputed-hint resolver: the clue file already names the destination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from treasure_hunt.resolvers.base import ClueResolver

if TYPE_CHECKING:
    from treasure_hunt.hunt.state import LocationInfo


class HintResolver(ClueResolver):
    """Follows the next_hint stored on each location."""

    @property
    def name(self) -> str:
        return "hint"

    @property
    def description(self) -> str:
        return "Destination named in the clue file"

    def suggest(self, node: int, location: LocationInfo) -> int | None:
        return location.next_hint
