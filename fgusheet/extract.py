"""
Field extractors for the ``character`` node of an FGU export.

Each reader takes the character subtree and returns model records, filling in
defaults for anything the export leaves out.
"""

from fgusheet.model import (
    COIN_ORDER,
    AbilityScore,
    CharacterClass,
    Feat,
    Feature,
    InventoryItem,
    Skill,
    Spell,
    Tracker,
)
from fgusheet.stats import ABILITY_NAMES
from fgusheet.tree import TEXT_KEYS, extract_entries, iter_entries, parse_int, safe_get

SORCERY_POINTS = "Sorcery Points"


def _squash(text):
    # closes the gaps left where inline markup was dropped
    return " ".join(text.split())


def _paragraph_text(p, bold_lead_in=False):
    if isinstance(p, str):
        return _squash(p)
    if not isinstance(p, dict):
        return ""
    rest = _squash(p.get(TEXT_KEYS[0], ""))
    if bold_lead_in and "b" in p:
        # <p><b>Splash.</b> rest of the text</p>
        bold = safe_get(p, "b")
        if not isinstance(bold, str):
            bold = ""
        return " ".join(part for part in (_squash(bold), rest) if part)
    return rest


def formatted_paragraphs(entry, field, bold_lead_in=False):
    """Return the non-empty paragraphs of a formattedtext child, in order."""
    body = entry.get(field)
    if isinstance(body, list):
        body = body[0] if body else None
    if isinstance(body, str):
        return (body.strip(),) if body.strip() else ()
    if not isinstance(body, dict):
        return ()

    paragraphs = body.get("p", [])
    if not paragraphs and body.get(TEXT_KEYS[0], "").strip():
        return (body[TEXT_KEYS[0]].strip(),)

    texts = (_paragraph_text(p, bold_lead_in) for p in paragraphs)
    return tuple(text for text in texts if text)


def _text(node, name, default=""):
    value = safe_get(node, f"{name}.0", default)
    return value if isinstance(value, str) else default


def extract_identity(char):
    return {
        "name": _text(char, "name").strip(),
        "race": _text(char, "race"),
        "subrace": _text(char, "subrace"),
        "alignment": _text(char, "alignment"),
        "background": _text(char, "background"),
        "gender": _text(char, "gender"),
        "age": _text(char, "age"),
    }


def extract_personality(char):
    return {
        "personality": _text(char, "personality"),
        "ideals": _text(char, "ideals"),
        "bonds": _text(char, "bonds"),
        "flaws": _text(char, "flaws"),
    }


def extract_classes(char):
    """Return ``(classes, total_level)``.

    Unnamed class entries are not listed but their level still counts.
    """
    entries = extract_entries(char, "classes.0", lambda cls: CharacterClass(
        name=_text(cls, "name"),
        level=parse_int(_text(cls, "level")),
        specialization=_text(cls, "specialization"),
    ))
    total_level = sum(cls.level for cls in entries)
    return tuple(cls for cls in entries if cls.name), total_level


def extract_abilities(char):
    abilities = {}
    for abil_name in ABILITY_NAMES:
        abil = safe_get(char, f"abilities.0.{abil_name}.0", None)
        if not isinstance(abil, dict):
            abilities[abil_name] = AbilityScore()
            continue
        abilities[abil_name] = AbilityScore(
            score=_text(abil, "score", "10"),
            bonus=_text(abil, "bonus", "0"),
            save=_text(abil, "save", "0"),
            save_proficient=_text(abil, "saveprof") == "1",
        )
    return abilities


def extract_vitals(char, abilities):
    initiative = _text(char, "initiative.0.total")
    if not initiative:
        initiative = abilities["dexterity"].bonus if "dexterity" in abilities else "0"
    return {
        "hp_total": _text(char, "hp.0.total", "0").strip(),
        "hp_wounds": _text(char, "hp.0.wounds", "0").strip(),
        "hp_temp": _text(char, "hp.0.temporary", "0").strip(),
        "armor_class": _text(char, "defenses.0.ac.0.total", "10"),
        "speed": _text(char, "speed.0.total", "30"),
        "initiative": initiative,
    }


def extract_skills(char):
    skills = extract_entries(char, "skilllist.0", lambda skill: Skill(
        name=_text(skill, "name"),
        total=_text(skill, "total"),
        proficient=_text(skill, "prof") == "1",
        stat=_text(skill, "stat"),
    ))
    skills.sort(key=lambda x: x.name)
    return tuple(skills)


def extract_features(char):
    return tuple(extract_entries(char, "featurelist.0", lambda feature: Feature(
        name=_text(feature, "name"),
        level=_text(feature, "level"),
        paragraphs=formatted_paragraphs(feature, "text"),
    )))


def extract_feats(char):
    return tuple(extract_entries(char, "featlist.0", lambda feat: Feat(
        name=_text(feat, "name"),
        category=_text(feat, "category"),
        paragraphs=formatted_paragraphs(feat, "text"),
    )))


def extract_inventory(char):
    return tuple(extract_entries(char, "inventorylist.0", lambda item: InventoryItem(
        name=_text(item, "name"),
        count=_text(item, "count", "1"),
        cost=_text(item, "cost"),
        paragraphs=formatted_paragraphs(item, "description", bold_lead_in=True),
    )))


def extract_coins(char):
    coins = {code: "0" for code in COIN_ORDER}
    for coin in iter_entries(safe_get(char, "coins.0", {})):
        coin_name = _text(coin, "name")
        if coin_name:
            coins[coin_name] = _text(coin, "amount", "0")
    return coins


def extract_spell_slots(char):
    spell_slots = {}
    powermeta = safe_get(char, "powermeta.0", {})
    for slot_level in range(1, 10):
        slot = safe_get(powermeta, f"spellslots{slot_level}.0", None)
        if not isinstance(slot, dict):
            continue
        max_slots = _text(slot, "max", "0")
        if max_slots != "0":
            spell_slots[slot_level] = Tracker(max=max_slots, used=_text(slot, "used", "0"))
    return spell_slots


def extract_sorcery_points(char):
    """Return the last "Sorcery Points" power with a nonzero max, if any."""
    tracker = None
    for power in iter_entries(safe_get(char, "powers.0", {})):
        if _text(power, "name") != SORCERY_POINTS:
            continue
        sorcery_max = _text(power, "prepared", "0")
        if sorcery_max != "0":
            tracker = Tracker(max=sorcery_max, used=_text(power, "locked", "0"))
    return tracker


def _spell_from_power(power):
    group = _text(power, "group")
    level = _text(power, "level")
    school = _text(power, "school")
    if not (("Spells" in group or school) and level):
        return None
    return Spell(
        name=_text(power, "name"),
        level=level,
        prepared=_text(power, "prepared", "0"),
        school=school,
        casting_time=_text(power, "castingtime"),
        range=_text(power, "range"),
        components=_text(power, "components"),
        duration=_text(power, "duration"),
        ritual=_text(power, "ritual", "0") == "1",
        paragraphs=formatted_paragraphs(power, "description"),
    )


def extract_spells(char):
    spells = extract_entries(char, "powers.0", _spell_from_power)
    spells.sort(key=lambda x: (x.sort_level, x.name))
    return tuple(spells)
