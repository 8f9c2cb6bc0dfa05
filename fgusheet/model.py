"""Render-ready character records built from an FGU export."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from fgusheet.tree import parse_int

PARAGRAPH_SEPARATOR = "\n\n"
COIN_ORDER = ("PP", "GP", "EP", "SP", "CP")


class _Described:
    """Mixin for records carrying rich-text paragraphs."""

    paragraphs: Tuple[str, ...]

    @property
    def description(self) -> str:
        return PARAGRAPH_SEPARATOR.join(self.paragraphs)


@dataclass(frozen=True)
class CharacterClass:
    name: str
    level: int = 0
    specialization: str = ""


@dataclass(frozen=True)
class AbilityScore:
    score: str = "10"
    bonus: str = "0"
    save: str = "0"
    save_proficient: bool = False


@dataclass(frozen=True)
class Skill:
    name: str = ""
    total: str = ""
    proficient: bool = False
    stat: str = ""


@dataclass(frozen=True)
class Feature(_Described):
    name: str = ""
    level: str = ""
    paragraphs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Feat(_Described):
    name: str = ""
    category: str = ""
    paragraphs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InventoryItem(_Described):
    name: str = ""
    count: str = "1"
    cost: str = ""
    paragraphs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Tracker:
    """A max/used pool shown as bubbles (spell slots, sorcery points)."""

    max: str = "0"
    used: str = "0"

    @property
    def max_count(self) -> int:
        return max(parse_int(self.max), 0)

    @property
    def used_count(self) -> int:
        return max(parse_int(self.used), 0)

    @property
    def bubbles(self):
        """One bool per bubble, True for the spent ones."""
        used = self.used_count
        return [i < used for i in range(self.max_count)]


@dataclass(frozen=True)
class Spell(_Described):
    name: str = ""
    level: str = "0"
    prepared: str = "0"
    school: str = ""
    casting_time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    ritual: bool = False
    paragraphs: Tuple[str, ...] = ()

    @property
    def is_prepared(self) -> bool:
        return bool(self.prepared) and self.prepared != "0"

    @property
    def sort_level(self) -> int:
        """Numeric spell level, or 99 for levels that are not a number."""
        level = parse_int(self.level, None)
        if level is None or level < 0:
            return 99
        return level

    @property
    def level_label(self) -> str:
        level = self.sort_level
        if level == 0:
            return "Cantrip"
        if level == 99:
            return self.level.strip()
        return str(level)


@dataclass(frozen=True)
class CharacterView:
    name: str = ""
    race: str = ""
    subrace: str = ""
    alignment: str = ""
    background: str = ""
    gender: str = ""
    age: str = ""

    classes: Tuple[CharacterClass, ...] = ()
    total_level: int = 0

    abilities: Dict[str, AbilityScore] = field(default_factory=dict)

    proficiency_bonus: int = 2
    spellcasting_ability: Optional[str] = None
    spell_save_dc: int = 10
    spell_attack_bonus: int = 2
    melee_attack_bonus: int = 2

    hp_total: str = "0"
    hp_wounds: str = "0"
    hp_temp: str = "0"
    armor_class: str = "10"
    speed: str = "30"
    initiative: str = "0"

    skills: Tuple[Skill, ...] = ()
    features: Tuple[Feature, ...] = ()
    feats: Tuple[Feat, ...] = ()
    inventory: Tuple[InventoryItem, ...] = ()
    coins: Dict[str, str] = field(default_factory=lambda: {code: "0" for code in COIN_ORDER})
    spell_slots: Dict[int, Tracker] = field(default_factory=dict)
    sorcery_points: Optional[Tracker] = None
    spells: Tuple[Spell, ...] = ()

    personality: str = ""
    ideals: str = ""
    bonds: str = ""
    flaws: str = ""

    @property
    def race_display(self) -> str:
        if not self.race:
            return ""
        if self.subrace:
            return f"{self.race} ({self.subrace})"
        return self.race

    @property
    def classes_display(self) -> str:
        return ", ".join(f"{c.name} {c.level}" for c in self.classes)

    @property
    def has_personality(self) -> bool:
        return any((self.personality, self.ideals, self.bonds, self.flaws))

    def spells_by_level(self):
        """Group spells into ``[(label, [spells])]``, cantrips first."""
        groups = {}
        for spell in self.spells:
            groups.setdefault((spell.sort_level, spell.level_label), []).append(spell)
        return [(label, groups[(level, label)]) for level, label in sorted(groups)]
