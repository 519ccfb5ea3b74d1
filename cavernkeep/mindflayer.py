"""Mindflayers: alien creatures armed with psychic projectiles and affinities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from cavernkeep.creature import Category, Creature, _flag


class Variant(str, Enum):
    """Kind of psychic power, used for both projectiles and affinities."""

    PSIONIC = "PSIONIC"
    TELEPATHIC = "TELEPATHIC"
    ILLUSIONARY = "ILLUSIONARY"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Projectile:
    """A stack of projectiles of one variant."""

    type: Variant
    quantity: int


class Mindflayer(Creature):
    """A creature with projectiles, psychic affinities and the power to summon."""

    def __init__(
        self,
        name: str = Creature.DEFAULT_NAME,
        category: Category = Category.ALIEN,
        hitpoints: int = 1,
        level: int = 1,
        tame: bool = False,
        projectiles: Iterable[Projectile] = (),
        summoning: bool = False,
        affinities: Iterable[Variant] = (),
    ) -> None:
        super().__init__(name, category, hitpoints, level, tame)
        self._projectiles: list[Projectile] = []
        self._affinities: list[Variant] = []
        self.set_projectiles(projectiles)
        self.summoning = bool(summoning)
        self.set_affinities(affinities)

    @property
    def projectiles(self) -> list[Projectile]:
        """A copy of the held projectiles, one entry per variant."""
        return list(self._projectiles)

    @property
    def affinities(self) -> list[Variant]:
        """A copy of the affinities, without duplicates."""
        return list(self._affinities)

    def set_projectiles(self, projectiles: Iterable[Projectile]) -> None:
        """Store ``projectiles``, merging quantities of the same variant.

        Entries with a quantity of zero or less are dropped. Variants keep the
        order of their first positive occurrence.
        """
        totals: dict[Variant, int] = {}
        for projectile in projectiles:
            if projectile.quantity > 0:
                variant = Variant(projectile.type)
                totals[variant] = totals.get(variant, 0) + projectile.quantity
        self._projectiles = [Projectile(v, q) for v, q in totals.items()]

    def set_affinities(self, affinities: Iterable[Variant]) -> None:
        """Store ``affinities`` without duplicates, keeping first occurrences."""
        self._affinities = list(dict.fromkeys(Variant(a) for a in affinities))

    def describe(self) -> str:
        """Return the mindflayer's data as printable lines."""
        lines = [
            f"MINDFLAYER - {self.name}",
            f"CATEGORY: {self.category.value}",
            f"HP: {self.hitpoints}",
            f"LVL: {self.level}",
            f"TAME: {_flag(self.tame)}",
            f"SUMMONING: {_flag(self.summoning)}",
        ]
        lines.extend(f"{p.type.value}: {p.quantity}" for p in self._projectiles)
        if self._affinities:
            lines.append("AFFINITIES: ")
            lines.extend(a.value for a in self._affinities)
        return "".join(f"{line}\n" for line in lines)

    def _spend_telepathic_projectile(self) -> bool:
        for index, projectile in enumerate(self._projectiles):
            if projectile.type is Variant.TELEPATHIC:
                if projectile.quantity > 1:
                    self._projectiles[index] = Projectile(
                        Variant.TELEPATHIC, projectile.quantity - 1
                    )
                else:
                    del self._projectiles[index]
                return True
        return False

    def eat_myco_morsel(self) -> bool:
        """Feed the mindflayer a mushroom; return True if it leaves the cavern.

        Undead mindflayers become tame and gain a hitpoint. Mystical ones that
        cannot summon either lose a hitpoint (becoming untamed at one hitpoint)
        when tame, or leave when untamed. Alien ones gain a hitpoint through a
        telepathic affinity or by spending a telepathic projectile; failing
        both they gain two hitpoints and become tame.
        """
        if self.category is Category.UNDEAD:
            self.tame = True
            self.set_hitpoints(self.hitpoints + 1)
        elif self.category is Category.MYSTICAL:
            if not self.summoning:
                if not self.tame:
                    return True
                if self.hitpoints == 1:
                    self.tame = False
                else:
                    self.set_hitpoints(self.hitpoints - 1)
        elif self.category is Category.ALIEN:
            if (
                Variant.TELEPATHIC in self._affinities
                or self._spend_telepathic_projectile()
            ):
                self.set_hitpoints(self.hitpoints + 1)
            else:
                self.set_hitpoints(self.hitpoints + 2)
                self.tame = True
        return False