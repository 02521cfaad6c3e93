"""
registry.py - Corridor Registry

Ordered, read-only collection of validated corridors with lookup by id.

A registry is all-or-nothing: every corridor is validated (and ids checked for
uniqueness) before any is stored, so a malformed data set never yields a
partially loaded registry.
"""

from __future__ import annotations
from functools import lru_cache
import logging
from typing import Dict, Iterable, Iterator, List

from .core import Corridor, NotFoundError
from .corridors import load_corridors
from .validation import validate_corridors


logger = logging.getLogger(__name__)


class CorridorRegistry:
    """
    Corridors keyed by id, in the order they were supplied.

    Example:
        registry = CorridorRegistry(load_corridors())
        corridor = registry.get_corridor("sgd-gbp")
    """

    def __init__(self, corridors: Iterable[Corridor], validate: bool = True):
        """
        Build a registry.

        Args:
            corridors: Corridors in display order
            validate: Run the load-time validation pass (tests may disable it
                to inspect deliberately broken data)

        Raises:
            CorridorDefinitionError: if any corridor is malformed or ids repeat
        """
        items = list(corridors)
        if validate:
            validate_corridors(items)

        self._corridors: Dict[str, Corridor] = {}
        for corridor in items:
            self._corridors[corridor.id] = corridor
        logger.debug("Loaded %d corridors: %s", len(self._corridors), ", ".join(self._corridors))

    def get_corridor(self, corridor_id: str) -> Corridor:
        """
        Look up a corridor by id.

        Raises:
            NotFoundError: if no corridor has this id
        """
        try:
            return self._corridors[corridor_id]
        except KeyError:
            raise NotFoundError(
                f"Unknown corridor {corridor_id!r}; available: {', '.join(self._corridors)}"
            ) from None

    def ids(self) -> List[str]:
        return list(self._corridors)

    def first(self) -> Corridor:
        """The first corridor in display order."""
        if not self._corridors:
            raise NotFoundError("Registry is empty")
        return next(iter(self._corridors.values()))

    def __iter__(self) -> Iterator[Corridor]:
        return iter(self._corridors.values())

    def __len__(self) -> int:
        return len(self._corridors)

    def __contains__(self, corridor_id: object) -> bool:
        return corridor_id in self._corridors

    def __repr__(self) -> str:
        return f"CorridorRegistry({', '.join(self._corridors)})"


@lru_cache(maxsize=1)
def default_registry() -> CorridorRegistry:
    """Registry of the bundled corridors, built and validated once per process."""
    return CorridorRegistry(load_corridors())
