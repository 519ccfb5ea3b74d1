import pytest

from cavernkeep.creature import Category, Creature


class _Stub(Creature):
    def eat_myco_morsel(self):
        return False


def test_defaults():
    c = _Stub()
    assert Creature.describe(c) == (
        "NAMELESS\nCategory: UNKNOWN\nLevel: 1\nHitpoints: 1\nTame: FALSE\n"
    )
    assert c.name == "NAMELESS"
    assert c.category is Category.UNKNOWN
    assert c.hitpoints == 1
    assert c.level == 1
    assert c.tame is False


def test_name_is_uppercased():
    c = _Stub("draco", Category.UNDEAD, 7, 3, True)
    assert Creature.describe(c) == (
        "DRACO\nCategory: UNDEAD\nLevel: 3\nHitpoints: 7\nTame: TRUE\n"
    )
    assert c.name == "DRACO"
    assert c.category is Category.UNDEAD
    assert c.hitpoints == 7
    assert c.level == 3
    assert c.tame is True


@pytest.mark.parametrize("bad", ["", "x1", "two words", "caf\u00e9"])
def test_invalid_name_becomes_nameless(bad):
    c = _Stub(bad)
    assert Creature.describe(c).startswith("NAMELESS\n")
    assert c.name == "NAMELESS"


@pytest.mark.parametrize("value", [0, -4])
def test_non_positive_stats_default_to_one(value):
    c = _Stub("ghast", hitpoints=value, level=value)
    text = Creature.describe(c)
    assert "Level: 1\n" in text
    assert "Hitpoints: 1\n" in text
    assert c.hitpoints == 1
    assert c.level == 1


def test_set_name_rejects_and_keeps_old():
    c = _Stub("ghast")
    assert Creature.set_name(c, "b4d") is False
    assert c.name == "GHAST"
    assert Creature.set_name(c, "wraith") is True
    assert c.name == "WRAITH"


def test_set_hitpoints_and_level():
    c = _Stub("ghast")
    assert Creature.set_hitpoints(c, 5) is True
    assert c.hitpoints == 5
    assert Creature.set_hitpoints(c, 0) is False
    assert c.hitpoints == 5
    assert Creature.set_level(c, 9) is True
    assert Creature.set_level(c, -1) is False
    assert c.level == 9


def test_equality_ignores_hitpoints():
    a = _Stub("imp", Category.ALIEN, 3, 2, False)
    b = _Stub("IMP", Category.ALIEN, 40, 2, False)
    assert Creature.__eq__(a, b) is True
    assert a == b


@pytest.mark.parametrize(
    "other",
    [
        _Stub("imp", Category.ALIEN, 3, 2, True),
        _Stub("imp", Category.UNDEAD, 3, 2, False),
        _Stub("imp", Category.ALIEN, 3, 5, False),
        _Stub("elf", Category.ALIEN, 3, 2, False),
    ],
)
def test_inequality(other):
    a = _Stub("imp", Category.ALIEN, 3, 2, False)
    assert Creature.__eq__(a, other) is False
    assert a != other
    assert not (a == other)


def test_equality_with_non_creature_is_false():
    c = _Stub()
    assert Creature.__eq__(c, c) is True
    assert (c == 5) is False


def test_describe_and_display(capsys):
    c = _Stub("draco", Category.UNDEAD, 7, 3, True)
    expected = "DRACO\nCategory: UNDEAD\nLevel: 3\nHitpoints: 7\nTame: TRUE\n"
    assert Creature.describe(c) == expected
    Creature.display(c)
    assert capsys.readouterr().out == expected


def test_describe_untame_flag():
    assert Creature.describe(_Stub()).endswith("Tame: FALSE\n")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        Creature()


def test_category_compares_to_string():
    assert Category.MYSTICAL == "MYSTICAL"
    assert Category("ALIEN") is Category.ALIEN