"""Skill reference table for charsheet.

Each skill draws its base modifier from exactly one ability. The table is
fixed domain data, shared read-only by every derived sheet.

The intelligence skill some rulebook translations call "Analysis" is listed
under its usual English name, "Investigation". Clients matching on skill
names should use "Investigation".
"""

from types import MappingProxyType

from charsheet.game.character.attributes import AbilityName

# Skill name -> governing ability, as shown on the sheet
SKILL_ABILITY_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        "Acrobatics": "Dexterity",
        "Investigation": "Intelligence",
        "Athletics": "Strength",
        "Perception": "Wisdom",
        "Survival": "Wisdom",
        "Performance": "Charisma",
        "Intimidation": "Charisma",
        "History": "Intelligence",
        "Sleight of Hand": "Dexterity",
        "Arcana": "Intelligence",
        "Medicine": "Wisdom",
        "Deception": "Charisma",
        "Nature": "Intelligence",
        "Insight": "Wisdom",
        "Stealth": "Dexterity",
        "Persuasion": "Charisma",
        "Animal Handling": "Wisdom",
    }
)

SKILL_NAMES: tuple[str, ...] = tuple(SKILL_ABILITY_MAP)


def get_skill_ability(skill: str) -> AbilityName:
    """Get the ability that governs a skill.

    Args:
        skill: Canonical skill name (exact match, e.g. "Sleight of Hand")

    Returns:
        The governing AbilityName

    Raises:
        KeyError: If the skill is not in the reference table
    """
    return AbilityName(SKILL_ABILITY_MAP[skill].lower())

