import string

import pytest

from cavernkeep.cavern import Cavern
from cavernkeep.creature import Category
from cavernkeep.dragon import Dragon, Element
from cavernkeep.ghoul import Faction, Ghoul
from cavernkeep.mindflayer import Mindflayer


@pytest.fixture
def cavern():
    cave = Cavern()
    cave.enter(Dragon("Smaug", Category.MYSTICAL, 5, 2, True, Element.FIRE))
    cave.enter(Ghoul("Rot", Category.UNDEAD, 3, 4, False, 1, Faction.FLESHGORGER))
    cave.enter(Mindflayer("Squid", Category.ALIEN, 2, 6, True))
    return cave


def test_empty_cavern_statistics():
    cave = Cavern()
    assert cave.is_empty()
    assert cave.average_level() == 0
    assert cave.tame_percentage() == 0.0
    assert cave.level_sum == 0
    assert cave.tame_count == 0


def test_enter_refuses_equal_creature(cavern):
    assert len(cavern) == 3
    duplicate = Dragon("smaug", Category.MYSTICAL, 99, 2, True)
    assert cavern.enter(duplicate) is False
    assert len(cavern) == 3


def test_enter_accepts_creature_differing_in_level(cavern):
    assert cavern.enter(Dragon("Smaug", Category.MYSTICAL, 5, 3, True)) is True
    assert len(cavern) == 4


def test_level_sum_and_tame_count_track_contents(cavern):
    assert cavern.level_sum == sum(c.level for c in cavern)
    assert cavern.tame_count == len([c for c in cavern if c.tame])


def test_exit_removes_and_updates(cavern):
    before = cavern.level_sum
    squid = Mindflayer("Squid", Category.ALIEN, 2, 6, True)
    assert cavern.exit(squid) is True
    assert squid not in cavern
    assert cavern.level_sum == before - squid.level
    assert cavern.exit(squid) is False


def test_average_level_exact_and_truncated():
    cave = Cavern()
    cave.enter(Dragon("A", level=2))
    cave.enter(Dragon("B", level=4))
    assert cave.average_level() == 3
    floor_cave = Cavern()
    floor_cave.enter(Dragon("A", level=1))
    floor_cave.enter(Dragon("B", level=2))
    assert floor_cave.average_level() == 1


def test_tame_percentage_rounds_up():
    cave = Cavern()
    cave.enter(Dragon("A", tame=True))
    cave.enter(Dragon("B"))
    cave.enter(Dragon("C"))
    assert cave.tame_percentage() == 33.34


def test_tame_percentage_all_tame():
    cave = Cavern()
    cave.enter(Dragon("A", tame=True))
    cave.enter(Ghoul("B", tame=True))
    assert cave.tame_percentage() == 100.0


def test_tally_category(cavern):
    assert cavern.tally_category("UNDEAD") == 1
    assert cavern.tally_category(Category.ALIEN) == 1
    assert cavern.tally_category("UNKNOWN") == 0
    assert cavern.tally_category("undead") == 0
    assert cavern.tally_category("DRAGONS") == 0


def test_release_below_level_negative_removes_nothing(cavern):
    assert cavern.release_below_level(-1) == 0
    assert len(cavern) == 3


def test_release_below_level_zero_removes_all(cavern):
    assert cavern.release_below_level() == 3
    assert cavern.is_empty()
    assert cavern.level_sum == 0


def test_release_below_level_threshold(cavern):
    assert cavern.release_below_level(5) == 2
    assert [c.name for c in cavern] == ["SQUID"]


def test_release_of_category(cavern):
    assert cavern.release_of_category("ghoul") == 0
    assert cavern.release_of_category("UNDEAD") == 1
    assert cavern.tally_category("UNDEAD") == 0
    assert len(cavern) == 2
    assert cavern.release_of_category() == 2
    assert cavern.is_empty()


def test_report_format():
    cave = Cavern()
    cave.enter(Ghoul("Rot", Category.UNDEAD, 3, 4, True))
    cave.enter(Ghoul("Mold", Category.UNDEAD, 3, 4, True))
    assert cave.report() == (
        "UNKNOWN: 0\nUNDEAD: 2\nMYSTICAL: 0\nALIEN: 0\n\n"
        "AVERAGE LEVEL: 4\nTAME: 100%\n"
    )


def test_display_creatures(cavern, capsys):
    cavern.display_creatures()
    out = capsys.readouterr().out
    assert out == "".join(c.describe() for c in cavern)


def test_display_category(cavern, capsys):
    cavern.display_category("ALIEN")
    out = capsys.readouterr().out
    assert out.startswith("MINDFLAYER - SQUID\n")
    assert "DRAGON" not in out


def test_myco_morsel_feast():
    cave = Cavern()
    fire = Dragon("Ember", Category.MYSTICAL, 3, 1, False, Element.FIRE)
    water = Dragon("Drip", Category.MYSTICAL, 1, 1, False, Element.WATER)
    cave.enter(fire)
    cave.enter(water)
    cave.myco_morsel_feast()
    assert water not in cave
    assert fire in cave
    assert fire.hitpoints == 4
    assert len(cave) == 1


def test_capacity_limit():
    cave = Cavern()
    names = [a + b for a in string.ascii_lowercase for b in string.ascii_lowercase]
    results = [cave.enter(Dragon(name)) for name in names[: Cavern.DEFAULT_CAPACITY + 1]]
    assert len(cave) == Cavern.DEFAULT_CAPACITY
    assert results[-1] is False
    assert all(results[:-1])