"""
Clue resolver base class.

A resolver looks at the location the hunter is standing on and suggests
where the clue points next. The search engine follows that suggestion
before falling back to plain graph exploration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treasure_hunt.hunt.state import LocationInfo


class ClueResolver(ABC):
    """
    Abstract base class for clue resolution strategies.

    Implementations are interchangeable from the engine's point of view:
    each returns at most one suggested location per call.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the resolver (e.g., 'tree', 'hint')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the resolution strategy."""
        ...

    @abstractmethod
    def suggest(self, node: int, location: LocationInfo) -> int | None:
        """
        Suggest the next location for the hunter.

        Args:
            node: Index of the current location
            location: Clue information stored for that location

        Returns:
            Suggested location index, or None if the clue resolves nowhere
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
