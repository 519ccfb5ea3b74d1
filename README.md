# cavernkeep

A small library for keeping creatures in a cavern. It models three kinds of
creature: dragons, ghouls and mindflayers. It provides a bag that holds at
most 100 items, and a cavern built on that bag which reports level and
tameness statistics for the creatures inside.

## Creatures

`cavernkeep.creature.Creature` is the abstract base class. Every creature has
these attributes:

- a `name`
- a `category`, a `Category` of `UNKNOWN`, `UNDEAD`, `MYSTICAL` or `ALIEN`
- `hitpoints`
- a `level`
- a `tame` flag

Names are stored in upper case and may hold ASCII letters only. In the
constructor, an empty name or one with any other character becomes
`NAMELESS`. Hitpoints and level must be positive; in the constructor an
invalid value becomes 1. After construction, `set_name`, `set_hitpoints` and
`set_level` change these values. Each returns `False` and leaves the value
unchanged when the new value is invalid.

Two creatures compare equal when they share name, category, level and
tameness. Hitpoints and subclass details do not count. Creatures are not
hashable.

`describe()` returns a creature's data as text. `display()` prints that text.

```python
from cavernkeep.creature import Category
from cavernkeep.dragon import Dragon, Element
from cavernkeep.ghoul import Ghoul, Faction
from cavernkeep.mindflayer import Mindflayer, Projectile, Variant

smaug = Dragon("smaug", Category.MYSTICAL, 10, 5, True, Element.FIRE, 3, True)
gnaw = Ghoul("gnaw", Category.UNDEAD, 4, 2, False, 3, Faction.FLESHGORGER, False)
flayer = Mindflayer(
    "illithid", Category.ALIEN, 6, 4, False,
    [Projectile(Variant.PSIONIC, 2), Projectile(Variant.PSIONIC, 1)],
    True,
    [Variant.TELEPATHIC, Variant.TELEPATHIC],
)

print(smaug.describe())
```

Each kind has its own default category and its own extra attributes:

| Kind | Default category | Extra attributes |
| --- | --- | --- |
| `Dragon` | `MYSTICAL` | `element` (an `Element`), `number_of_heads` (positive; set with `set_number_of_heads`), `flight` |
| `Ghoul` | `UNDEAD` | `decay` (not negative; set with `set_decay`), `faction` (a `Faction`), `transformation` |
| `Mindflayer` | `ALIEN` | `projectiles`, `summoning`, `affinities` |

For a mindflayer, `set_projectiles` merges projectiles of the same `Variant`
and drops those with a quantity of zero or less. `set_affinities` drops
duplicate affinities. Both keep the order in which items were first seen. The
`projectiles` and `affinities` properties return copies.

### Feeding

`eat_myco_morsel()` offers a creature a mushroom. The creature's hitpoints
and tameness may change. The result depends on:

- its kind
- its category
- its element or faction
- its tameness
- its hitpoints

The call returns `True` when the creature decides to leave the cavern.

## The bag

`cavernkeep.bag.ArrayBag` is an unordered container that holds at most 100
items (`ArrayBag.DEFAULT_CAPACITY`). It supports `len()`, iteration and `in`.

- `add` returns `False` once the bag is full.
- `remove` removes one matching item and moves the last item into its place.
  It returns `False` when no item matches.
- `contains` tells whether an item is held.
- `frequency_of` counts the items equal to a given one.
- `is_empty` tells whether the bag holds nothing.
- `clear` empties the bag.
- `bag /= other` (or `merge_unique`) adds the items of `other` that are not
  already present, while room remains.
- `bag += other` (or `merge_all`) adds every item of `other`, duplicates
  included, while room remains.

## The cavern

`cavernkeep.cavern.Cavern` is an `ArrayBag` of distinct creatures.

```python
from cavernkeep.cavern import Cavern

cavern = Cavern()
cavern.enter(smaug)      # False if an equal creature is inside or the cavern is full
cavern.enter(gnaw)
cavern.enter(flayer)

cavern.level_sum                 # sum of all levels
cavern.tame_count                # number of tame creatures
cavern.average_level()           # level sum divided by count, rounded down; 0 when empty
cavern.tame_percentage()         # percentage of tame creatures, rounded up to 2 places
cavern.tally_category("UNDEAD")  # only the exact upper-case category names match

cavern.myco_morsel_feast()       # everyone eats; creatures that want to leave are removed
cavern.release_below_level(3)    # 0 releases everyone; a negative level releases no one
cavern.release_of_category("ALIEN")  # "ALL" releases everyone; an unknown name releases no one
cavern.display_creatures()       # prints every creature
cavern.display_category("UNDEAD")
print(cavern.report())
```

- `exit(creature)` removes a creature and returns whether it was inside.
- `clear()` empties the cavern and returns how many creatures it held.
- The release methods return the number of creatures removed.
- `report()` returns the tally per category, the average level and the tame
  percentage as text.

## Loading from CSV

`cavernkeep.loader.load_cavern(path)` builds a cavern from a CSV file. The
first line is a header and is skipped. Blank lines are also skipped. Every
other line has these twelve columns:

```
TYPE,NAME,CATEGORY,HITPOINTS,LEVEL,TAME,ELEMENT/FACTION,HEADS,FLIGHT/TRANSFORM/SUMMONING,DECAY,AFFINITIES,PROJECTILES
```

- `TYPE` is `DRAGON`, `GHOUL` or `MINDFLAYER`. Rows of any other type are
  skipped.
- An unrecognised category, element or faction falls back to `UNKNOWN` or
  `NONE`.
- `TAME` and the special flag are integers; `0` means false.
- Affinities look like `PSIONIC;TELEPATHIC`.
- Projectiles look like `PSIONIC-2;TELEPATHIC-1`.
- Either the affinities or the projectiles field may be `NONE` or empty.
- A row with the wrong number of fields, a malformed number, an unknown
  variant or a malformed projectile raises `ValueError`.

`read_creatures(path)` yields the creatures without building a cavern.
`parse_row`, `parse_affinities` and `parse_projectiles` work on single rows
and fields.

```python
from cavernkeep.loader import load_cavern

cavern = load_cavern("creatures.csv")
print(cavern.report())
```

## What it does not do

This is a library only: it installs no command to run. It reads creatures
from CSV but has no way to write a cavern back to a file; a cavern lives only
in memory.