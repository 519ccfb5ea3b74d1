"""Ghouls: undead creatures with a faction and a level of decay."""

from __future__ import annotations

from enum import Enum

from cavernkeep.creature import Category, Creature, _flag


class Faction(str, Enum):
    """Faction a ghoul belongs to."""

    NONE = "NONE"
    FLESHGORGER = "FLESHGORGER"
    SHADOWSTALKER = "SHADOWSTALKER"
    PLAGUEWEAVER = "PLAGUEWEAVER"

    def __str__(self) -> str:
        return self.value


class Ghoul(Creature):
    """A creature with a level of decay, a faction and the power to transform."""

    def __init__(
        self,
        name: str = Creature.DEFAULT_NAME,
        category: Category = Category.UNDEAD,
        hitpoints: int = 1,
        level: int = 1,
        tame: bool = False,
        decay: int = 0,
        faction: Faction = Faction.NONE,
        transformation: bool = False,
    ) -> None:
        super().__init__(name, category, hitpoints, level, tame)
        self._decay = 0
        self.set_decay(decay)
        self.faction = Faction(faction)
        self.transformation = bool(transformation)

    @property
    def decay(self) -> int:
        return self._decay

    def set_decay(self, decay: int) -> bool:
        """Store ``decay`` if it is not negative."""
        if decay < 0:
            return False
        self._decay = decay
        return True

    def describe(self) -> str:
        """Return the ghoul's data as printable lines."""
        return (
            f"GHOUL - {self.name}\n"
            f"CATEGORY: {self.category.value}\n"
            f"HP: {self.hitpoints}\n"
            f"LVL: {self.level}\n"
            f"TAME: {_flag(self.tame)}\n"
            f"DECAY: {self.decay}\n"
            f"FACTION: {self.faction.value}\n"
            f"IT {'CAN' if self.transformation else 'CANNOT'} TRANSFORM\n"
        )

    def eat_myco_morsel(self) -> bool:
        """Feed the ghoul a mushroom; return True if it leaves the cavern.

        Undead ghouls become tame and gain a hitpoint. Otherwise a fleshgorger
        becomes untamed, or leaves if already untamed; a tame shadowstalker
        loses a hitpoint, or becomes untamed if it has only one left.
        """
        if self.category is Category.UNDEAD:
            self.tame = True
            self.set_hitpoints(self.hitpoints + 1)
            return False
        if self.faction is Faction.FLESHGORGER:
            if not self.tame:
                return True
            self.tame = False
        elif self.faction is Faction.SHADOWSTALKER and self.tame:
            if self.hitpoints > 1:
                self.set_hitpoints(self.hitpoints - 1)
            else:
                self.tame = False
        return False