"""Reading creatures from CSV files into a cavern."""

from __future__ import annotations

import csv
from os import PathLike
from typing import Iterator, Sequence, Union

from cavernkeep.cavern import Cavern
from cavernkeep.creature import Category, Creature
from cavernkeep.dragon import Dragon, Element
from cavernkeep.ghoul import Faction, Ghoul
from cavernkeep.mindflayer import Mindflayer, Projectile, Variant

PathType = Union[str, "PathLike[str]"]

COLUMNS = (
    "TYPE",
    "NAME",
    "CATEGORY",
    "HITPOINTS",
    "LEVEL",
    "TAME",
    "ELEMENT/FACTION",
    "HEADS",
    "FLIGHT/TRANSFORM/SUMMONING",
    "DECAY",
    "AFFINITIES",
    "PROJECTILES",
)

_EMPTY = "NONE"


def _is_empty(field: str) -> bool:
    return field.strip() in ("", _EMPTY)


def _variant(name: str) -> Variant:
    try:
        return Variant(name.strip())
    except ValueError:
        raise ValueError(f"unknown variant: {name.strip()!r}") from None


def parse_affinities(field: str) -> list[Variant]:
    """Parse ``A;B;...`` into variants; ``NONE`` or an empty field gives none."""
    if _is_empty(field):
        return []
    return [_variant(part) for part in field.split(";")]


def parse_projectiles(field: str) -> list[Projectile]:
    """Parse ``TYPE-QTY;TYPE-QTY`` into projectiles; ``NONE`` gives none."""
    if _is_empty(field):
        return []
    projectiles = []
    for part in field.split(";"):
        kind, sep, quantity = part.partition("-")
        if not sep:
            raise ValueError(f"malformed projectile: {part.strip()!r}")
        projectiles.append(Projectile(_variant(kind), int(quantity.strip())))
    return projectiles


def _category(name: str) -> Category:
    try:
        return Category(name)
    except ValueError:
        return Category.UNKNOWN


def _element(name: str) -> Element:
    try:
        return Element(name)
    except ValueError:
        return Element.NONE


def _faction(name: str) -> Faction:
    try:
        return Faction(name)
    except ValueError:
        return Faction.NONE


def _flag(field: str) -> bool:
    return bool(int(field))


def parse_row(row: Sequence[str]) -> Creature | None:
    """Build a creature from one CSV row of twelve fields.

    Returns ``None`` when the type is not DRAGON, GHOUL or MINDFLAYER.
    Raises ``ValueError`` for a row of the wrong length or a malformed number.
    """
    if len(row) != len(COLUMNS):
        raise ValueError(f"expected {len(COLUMNS)} fields, got {len(row)}")
    (
        kind,
        name,
        category,
        hitpoints,
        level,
        tame,
        element_or_faction,
        heads,
        special,
        decay,
        affinities,
        projectiles,
    ) = (field.strip() for field in row)

    common = dict(
        name=name,
        category=_category(category),
        hitpoints=int(hitpoints),
        level=int(level),
        tame=_flag(tame),
    )
    if kind == "DRAGON":
        return Dragon(
            **common,
            element=_element(element_or_faction),
            number_of_heads=int(heads),
            flight=_flag(special),
        )
    if kind == "GHOUL":
        return Ghoul(
            **common,
            decay=int(decay),
            faction=_faction(element_or_faction),
            transformation=_flag(special),
        )
    if kind == "MINDFLAYER":
        return Mindflayer(
            **common,
            projectiles=parse_projectiles(projectiles),
            summoning=_flag(special),
            affinities=parse_affinities(affinities),
        )
    return None


def read_creatures(path: PathType) -> Iterator[Creature]:
    """Yield the creatures described in the CSV file at ``path``.

    The first line is a header and is skipped, as are blank lines and rows of
    an unrecognised type.
    """
    with open(path, newline="", encoding="utf-8") as stream:
        reader = csv.reader(stream)
        next(reader, None)
        for row in reader:
            if not any(field.strip() for field in row):
                continue
            creature = parse_row(row)
            if creature is not None:
                yield creature


def load_cavern(path: PathType) -> Cavern:
    """Return a cavern holding every creature from the CSV file at ``path``."""
    cavern = Cavern()
    for creature in read_creatures(path):
        cavern.enter(creature)
    return cavern