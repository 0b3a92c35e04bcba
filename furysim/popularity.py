"""How often an item shows up among the best gear sets."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ItemPopularity"]


@dataclass(eq=False)
class ItemPopularity:
    """An item name with a usage counter.

    Instances order and compare equal by counter; ordering against a plain
    string compares the item name, which allows sorted lookup by name.
    """

    name: str = ""
    counter: int = 0

    def matches(self, name: str) -> bool:
        """Whether this entry is for the item ``name``."""
        return self.name == name

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ItemPopularity):
            return self.counter < other.counter
        if isinstance(other, str):
            return self.name < other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemPopularity):
            return self.counter == other.counter
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]