"""Dragons: mystical creatures with an elemental affinity, heads and wings."""

from __future__ import annotations

from enum import Enum

from cavernkeep.creature import Category, Creature, _flag


class Element(str, Enum):
    """Elemental affinity of a dragon."""

    NONE = "NONE"
    FIRE = "FIRE"
    WATER = "WATER"
    EARTH = "EARTH"
    AIR = "AIR"

    def __str__(self) -> str:
        return self.value


class Dragon(Creature):
    """A creature with an element, a number of heads and the power of flight."""

    def __init__(
        self,
        name: str = Creature.DEFAULT_NAME,
        category: Category = Category.MYSTICAL,
        hitpoints: int = 1,
        level: int = 1,
        tame: bool = False,
        element: Element = Element.NONE,
        number_of_heads: int = 1,
        flight: bool = False,
    ) -> None:
        super().__init__(name, category, hitpoints, level, tame)
        self.element = Element(element)
        self._number_of_heads = 1
        self.set_number_of_heads(number_of_heads)
        self.flight = bool(flight)

    @property
    def number_of_heads(self) -> int:
        return self._number_of_heads

    def set_number_of_heads(self, number_of_heads: int) -> bool:
        """Store ``number_of_heads`` if it is positive."""
        if number_of_heads <= 0:
            return False
        self._number_of_heads = number_of_heads
        return True

    def describe(self) -> str:
        """Return the dragon's data as printable lines."""
        return (
            f"DRAGON - {self.name}\n"
            f"CATEGORY: {self.category.value}\n"
            f"HP: {self.hitpoints}\n"
            f"LVL: {self.level}\n"
            f"TAME: {_flag(self.tame)}\n"
            f"ELEMENT: {self.element.value}\n"
            f"HEADS: {self.number_of_heads}\n"
            f"IT {'CAN' if self.flight else 'CANNOT'} FLY\n"
        )

    def eat_myco_morsel(self) -> bool:
        """Feed the dragon a mushroom; return True if it leaves the cavern.

        Undead dragons become tame and gain a hitpoint; alien dragons gain a
        hitpoint. Mystical dragons of fire or earth gain a hitpoint; other
        mystical dragons leave if down to one hitpoint, otherwise they lose one
        and become untamed.
        """
        if self.category is Category.UNDEAD:
            self.tame = True
            self.set_hitpoints(self.hitpoints + 1)
        elif self.category is Category.ALIEN:
            self.set_hitpoints(self.hitpoints + 1)
        elif self.category is Category.MYSTICAL:
            if self.element in (Element.FIRE, Element.EARTH):
                self.set_hitpoints(self.hitpoints + 1)
            elif self.hitpoints > 1:
                self.set_hitpoints(self.hitpoints - 1)
                self.tame = False
            else:
                return True
        return False