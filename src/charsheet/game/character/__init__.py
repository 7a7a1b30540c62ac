"""Character rules: abilities, skills and sheet derivation."""

from .attributes import (
    ABILITY_NAMES,
    AbilityName,
    AbilityScores,
    calculate_modifiers,
    get_modifier,
    get_proficiency_bonus,
)
from .sheet import (
    Character,
    CharacterSheet,
    HitPoints,
    character_from_sheet,
    derive_sheet,
    unknown_proficiencies,
)
from .skills import SKILL_ABILITY_MAP, SKILL_NAMES, get_skill_ability

__all__ = [
    "ABILITY_NAMES",
    "AbilityName",
    "AbilityScores",
    "Character",
    "CharacterSheet",
    "HitPoints",
    "SKILL_ABILITY_MAP",
    "SKILL_NAMES",
    "calculate_modifiers",
    "character_from_sheet",
    "derive_sheet",
    "get_modifier",
    "get_proficiency_bonus",
    "get_skill_ability",
    "unknown_proficiencies",
]
