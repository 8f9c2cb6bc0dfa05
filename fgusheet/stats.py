"""Derived 5e statistics: proficiency, modifiers and spellcasting numbers."""

from fgusheet.tree import parse_int

ABILITY_NAMES = ["strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma"]

# checked in this order for every class; a later class overrides an earlier one
SPELLCASTING_CLASSES = [
    (("wizard",), "intelligence"),
    (("druid", "cleric", "ranger"), "wisdom"),
    (("paladin", "sorcerer", "bard", "warlock"), "charisma"),
]


def format_modifier(value):
    """Format ability modifier with + sign if positive."""
    try:
        val = int(value)
    except (TypeError, ValueError):
        return "" if value is None else str(value)
    return f"+{val}" if val >= 0 else str(val)


def get_proficiency_bonus(level):
    """Calculate proficiency bonus based on character level."""
    try:
        lvl = int(level)
    except (TypeError, ValueError):
        lvl = 1
    return 2 + ((lvl - 1) // 4)


def spellcasting_ability(class_names):
    """Return the ability used for spellcasting, or None for non-casters."""
    ability = None
    for class_name in class_names:
        lowered = (class_name or "").lower()
        for keywords, candidate in SPELLCASTING_CLASSES:
            if any(keyword in lowered for keyword in keywords):
                ability = candidate
                break
    return ability


def spell_save_dc(proficiency_bonus, spellcasting_modifier):
    return 8 + proficiency_bonus + spellcasting_modifier


def spell_attack_bonus(proficiency_bonus, spellcasting_modifier):
    return proficiency_bonus + spellcasting_modifier


def melee_attack_bonus(strength_bonus, proficiency_bonus):
    """Strength-based melee attack bonus.

    Finesse weapons are not considered; dexterity never replaces strength.
    """
    return parse_int(strength_bonus) + proficiency_bonus
