"""The base creature type shared by every inhabitant of a cavern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Category(str, Enum):
    """Broad family a creature belongs to."""

    UNKNOWN = "UNKNOWN"
    UNDEAD = "UNDEAD"
    MYSTICAL = "MYSTICAL"
    ALIEN = "ALIEN"

    def __str__(self) -> str:
        return self.value


def _flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


class Creature(ABC):
    """A named creature with a category, hitpoints, a level and a tame flag.

    Name, hitpoints and level are validated: invalid values are refused by the
    ``set_*`` methods (which return ``False``) and replaced by defaults in the
    constructor.
    """

    DEFAULT_NAME = "NAMELESS"

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        category: Category = Category.UNKNOWN,
        hitpoints: int = 1,
        level: int = 1,
        tame: bool = False,
    ) -> None:
        self._name = self.DEFAULT_NAME
        self._hitpoints = 1
        self._level = 1
        self.category = Category(category)
        self.tame = bool(tame)
        self.set_name(name)
        self.set_hitpoints(hitpoints)
        self.set_level(level)

    @property
    def name(self) -> str:
        """The creature's name, always in upper case."""
        return self._name

    @property
    def hitpoints(self) -> int:
        return self._hitpoints

    @property
    def level(self) -> int:
        return self._level

    def set_name(self, name: str) -> bool:
        """Store ``name`` in upper case if it is non-empty and purely alphabetic."""
        if not name or not all(ch.isascii() and ch.isalpha() for ch in name):
            return False
        self._name = name.upper()
        return True

    def set_hitpoints(self, hitpoints: int) -> bool:
        """Store ``hitpoints`` if it is positive."""
        if hitpoints <= 0:
            return False
        self._hitpoints = hitpoints
        return True

    def set_level(self, level: int) -> bool:
        """Store ``level`` if it is positive."""
        if level <= 0:
            return False
        self._level = level
        return True

    def describe(self) -> str:
        """Return the creature's data as printable lines."""
        return (
            f"{self.name}\n"
            f"Category: {self.category.value}\n"
            f"Level: {self.level}\n"
            f"Hitpoints: {self.hitpoints}\n"
            f"Tame: {_flag(self.tame)}\n"
        )

    def display(self) -> None:
        """Print the creature's description to standard output."""
        print(self.describe(), end="")

    @abstractmethod
    def eat_myco_morsel(self) -> bool:
        """Feed the creature a mushroom; return True if it leaves the cavern."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return (
            self.name == other.name
            and self.category == other.category
            and self.level == other.level
            and self.tame == other.tame
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, category={self.category.value}, "
            f"hitpoints={self.hitpoints}, level={self.level}, tame={self.tame})"
        )