import pytest

from fgusheet.stats import (
    format_modifier,
    get_proficiency_bonus,
    melee_attack_bonus,
    spell_attack_bonus,
    spell_save_dc,
    spellcasting_ability,
)


@pytest.mark.parametrize("level,bonus", [
    (1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (17, 6), (20, 6),
])
def test_proficiency_bonus_table(level, bonus):
    assert get_proficiency_bonus(level) == bonus


def test_proficiency_bonus_accepts_numeric_strings():
    assert get_proficiency_bonus("9") == 4


@pytest.mark.parametrize("level", ["", "abc", None])
def test_proficiency_bonus_unparsable_level_is_level_one(level):
    assert get_proficiency_bonus(level) == 2


@pytest.mark.parametrize("value,expected", [
    (0, "+0"),
    (3, "+3"),
    (-1, "-1"),
    ("2", "+2"),
    ("-4", "-4"),
    ("+5", "+5"),
    ("abc", "abc"),
    ("", ""),
])
def test_format_modifier(value, expected):
    assert format_modifier(value) == expected


@pytest.mark.parametrize("classes,ability", [
    (["Wizard"], "intelligence"),
    (["Cleric"], "wisdom"),
    (["Druid"], "wisdom"),
    (["Ranger"], "wisdom"),
    (["Warlock"], "charisma"),
    (["Bard"], "charisma"),
    (["Paladin"], "charisma"),
    (["Sorcerer"], "charisma"),
    (["Fighter"], None),
    ([], None),
    (["Fighter", "wizard (war magic)"], "intelligence"),
])
def test_spellcasting_ability(classes, ability):
    assert spellcasting_ability(classes) == ability


def test_spellcasting_ability_last_caster_wins():
    assert spellcasting_ability(["Wizard", "Cleric"]) == "wisdom"
    assert spellcasting_ability(["Cleric", "Wizard"]) == "intelligence"
    assert spellcasting_ability(["Warlock", "Fighter"]) == "charisma"


def test_spell_numbers():
    assert spell_save_dc(3, 4) == 15
    assert spell_attack_bonus(3, 4) == 7
    assert spell_save_dc(2, 0) == 10
    assert spell_attack_bonus(2, 0) == 2


def test_melee_attack_bonus_uses_strength_only():
    assert melee_attack_bonus("3", 3) == 6
    assert melee_attack_bonus("-1", 2) == 1
    assert melee_attack_bonus("", 2) == 2
