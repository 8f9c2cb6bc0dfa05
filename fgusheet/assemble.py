"""Build a CharacterView from a parsed FGU character node."""

import logging

from fgusheet import extract
from fgusheet.model import CharacterView
from fgusheet.stats import (
    get_proficiency_bonus,
    melee_attack_bonus,
    spell_attack_bonus,
    spell_save_dc,
    spellcasting_ability,
)
from fgusheet.tree import parse_int

logger = logging.getLogger(__name__)


def assemble_character(char):
    """Derive the full render-ready view of one character.

    ``char`` is the ``character`` node of the parsed tree. Missing fields
    fall back to defaults, so any dict (even an empty one) yields a view.
    """
    identity = extract.extract_identity(char)

    classes, total_level = extract.extract_classes(char)
    prof_bonus = get_proficiency_bonus(total_level)

    abilities = extract.extract_abilities(char)

    casting_ability = spellcasting_ability(cls.name for cls in classes)
    casting_mod = parse_int(abilities[casting_ability].bonus) if casting_ability else 0

    vitals = extract.extract_vitals(char, abilities)
    skills = extract.extract_skills(char)
    features = extract.extract_features(char)
    feats = extract.extract_feats(char)
    inventory = extract.extract_inventory(char)
    coins = extract.extract_coins(char)
    spell_slots = extract.extract_spell_slots(char)
    sorcery_points = extract.extract_sorcery_points(char)
    spells = extract.extract_spells(char)

    logger.debug(
        "Extracted %r: level %d, %d skills, %d features, %d items, %d spells",
        identity["name"], total_level, len(skills), len(features), len(inventory), len(spells),
    )

    return CharacterView(
        classes=classes,
        total_level=total_level,
        abilities=abilities,
        proficiency_bonus=prof_bonus,
        spellcasting_ability=casting_ability,
        spell_save_dc=spell_save_dc(prof_bonus, casting_mod),
        spell_attack_bonus=spell_attack_bonus(prof_bonus, casting_mod),
        melee_attack_bonus=melee_attack_bonus(abilities["strength"].bonus, prof_bonus),
        skills=skills,
        features=features,
        feats=feats,
        inventory=inventory,
        coins=coins,
        spell_slots=spell_slots,
        sorcery_points=sorcery_points,
        spells=spells,
        **identity,
        **vitals,
        **extract.extract_personality(char),
    )
