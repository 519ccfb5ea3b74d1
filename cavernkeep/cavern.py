"""A cavern: a bag of creatures with level and tameness statistics."""

from __future__ import annotations

import math

from cavernkeep.bag import ArrayBag
from cavernkeep.creature import Category, Creature

_CATEGORY_NAMES = tuple(category.value for category in Category)


def _is_category_name(category: object) -> bool:
    return isinstance(category, str) and str(category) in _CATEGORY_NAMES


class Cavern(ArrayBag[Creature]):
    """A bounded collection of distinct creatures.

    Two creatures count as the same when they compare equal, that is when
    they share name, category, level and tameness.
    """

    def __init__(self) -> None:
        super().__init__()

    @property
    def level_sum(self) -> int:
        """The sum of the levels of every creature in the cavern."""
        return sum(creature.level for creature in self)

    @property
    def tame_count(self) -> int:
        """The number of tame creatures in the cavern."""
        return sum(1 for creature in self if creature.tame)

    def enter(self, creature: Creature) -> bool:
        """Add ``creature`` unless an equal one is present or the cavern is full."""
        if creature in self:
            return False
        return self.add(creature)

    def exit(self, creature: Creature) -> bool:
        """Remove ``creature``; return whether it was in the cavern."""
        return self.remove(creature)

    def clear(self) -> int:
        """Remove every creature and return how many there were."""
        count = len(self)
        super().clear()
        return count

    def average_level(self) -> int:
        """Return the integer average level, or 0 for an empty cavern."""
        if self.is_empty():
            return 0
        return self.level_sum // len(self)

    def tame_percentage(self) -> float:
        """Return the share of tame creatures in percent, rounded up to 2 places."""
        if self.is_empty():
            return 0.0
        percent = self.tame_count / len(self) * 100
        return math.ceil(percent * 100) / 100

    def tally_category(self, category: str) -> int:
        """Count creatures of ``category``; unknown names (case-sensitive) count 0."""
        if not _is_category_name(category):
            return 0
        wanted = str(category)
        return sum(1 for creature in self if creature.category.value == wanted)

    def release_below_level(self, level: int = 0) -> int:
        """Remove creatures whose level is below ``level`` and return how many.

        A level of 0 removes everything; a negative level removes nothing.
        """
        if level < 0:
            return 0
        if level == 0:
            return self.clear()
        leaving = [creature for creature in self if creature.level < level]
        return sum(1 for creature in leaving if self.exit(creature))

    def release_of_category(self, category: str = "ALL") -> int:
        """Remove creatures of ``category`` and return how many.

        ``"ALL"`` removes everything; an unknown category removes nothing.
        """
        if category == "ALL":
            return self.clear()
        if not _is_category_name(category):
            return 0
        wanted = str(category)
        leaving = [c for c in self if c.category.value == wanted]
        return sum(1 for creature in leaving if self.exit(creature))

    def report(self) -> str:
        """Return a summary of category tallies, average level and tameness."""
        tallies = "".join(
            f"{name}: {self.tally_category(name)}\n" for name in _CATEGORY_NAMES
        )
        return (
            f"{tallies}\n"
            f"AVERAGE LEVEL: {self.average_level()}\n"
            f"TAME: {self.tame_percentage():g}%\n"
        )

    def display_creatures(self) -> None:
        """Print the description of every creature in the cavern."""
        for creature in self:
            creature.display()

    def display_category(self, category: str) -> None:
        """Print the description of every creature of exactly ``category``."""
        for creature in self:
            if creature.category.value == str(category):
                creature.display()

    def myco_morsel_feast(self) -> None:
        """Feed every creature a mushroom; those that choose to leave are removed."""
        for creature in list(self):
            if creature.eat_myco_morsel():
                self.exit(creature)