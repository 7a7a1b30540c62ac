"""Character sheet derivation for charsheet.

A stored Character holds only the base attributes. derive_sheet turns it into
the read-ready CharacterSheet: modifiers, saving throws, skills, armor class,
initiative and hit points. The derivation is pure and total over well-typed
input, so it can be called from any thread or task without locking.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from charsheet.game.character.attributes import (
    ABILITY_NAMES,
    AbilityScores,
    calculate_modifiers,
    get_proficiency_bonus,
)
from charsheet.game.character.skills import SKILL_ABILITY_MAP, SKILL_NAMES, get_skill_ability

# Base values for the simplified house rules
BASE_ARMOR_CLASS = 10
BASE_HIT_POINTS = 8


def unique_names(names: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicate names, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(names))


@dataclass(frozen=True)
class HitPoints:
    """Current and maximum hit points."""

    current: int
    max: int


@dataclass(frozen=True)
class Character:
    """Stored form of a character: identity plus base attributes."""

    id: str
    name: str
    character_class: str
    race: str
    alignment: str
    level: int
    current_hit_points: int
    ability_scores: AbilityScores
    skill_proficiencies: tuple[str, ...] = ()
    saving_throw_proficiencies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable and normalise to a duplicate-free tuple
        object.__setattr__(self, "skill_proficiencies", unique_names(self.skill_proficiencies))
        object.__setattr__(
            self, "saving_throw_proficiencies", unique_names(self.saving_throw_proficiencies)
        )


@dataclass(frozen=True)
class CharacterSheet:
    """Fully computed view of a character.

    Carries the stored fields (without the id) alongside everything derived
    from them. skill_map is the shared reference table, not per-character data.
    """

    name: str
    character_class: str
    race: str
    alignment: str
    level: int
    proficiency_bonus: int
    hit_points: HitPoints
    armor_class: int
    initiative: int
    ability_scores: AbilityScores
    ability_modifiers: AbilityScores
    saving_throws: dict[str, int]
    skills: dict[str, int]
    skill_proficiencies: tuple[str, ...]
    saving_throw_proficiencies: tuple[str, ...]
    skill_map: Mapping[str, str]


def calculate_saving_throws(
    modifiers: AbilityScores, proficiencies: frozenset[str], proficiency_bonus: int
) -> dict[str, int]:
    """Calculate the saving throw bonus for every ability.

    Args:
        modifiers: Ability modifiers
        proficiencies: Lowercase ability names the character is proficient in
        proficiency_bonus: Bonus added for proficient saves

    Returns:
        Dictionary with all six lowercase ability names
    """
    return {
        ability: modifiers.get(ability) + (proficiency_bonus if ability in proficiencies else 0)
        for ability in ABILITY_NAMES
    }


def calculate_skills(
    modifiers: AbilityScores, proficiencies: frozenset[str], proficiency_bonus: int
) -> dict[str, int]:
    """Calculate the bonus for every skill in the reference table.

    Names in proficiencies that match no skill contribute nothing.

    Args:
        modifiers: Ability modifiers
        proficiencies: Skill names the character is proficient in
        proficiency_bonus: Bonus added for proficient skills

    Returns:
        Dictionary with every canonical skill name
    """
    return {
        skill: modifiers.get(get_skill_ability(skill))
        + (proficiency_bonus if skill in proficiencies else 0)
        for skill in SKILL_NAMES
    }


def calculate_hit_points(
    stored_current: int, constitution_modifier: int, level: int
) -> HitPoints:
    """Calculate maximum hit points and clamp the current value to it.

    Max HP follows the flat rule 8 + CON modifier * level. Current HP is only
    capped from above; a negative stored value passes through.
    """
    max_hp = BASE_HIT_POINTS + constitution_modifier * level
    return HitPoints(current=min(stored_current, max_hp), max=max_hp)


def derive_sheet(character: Character) -> CharacterSheet:
    """Derive the full character sheet from a stored character.

    Args:
        character: The stored character

    Returns:
        The computed CharacterSheet
    """
    proficiency_bonus = get_proficiency_bonus(character.level)
    modifiers = calculate_modifiers(character.ability_scores)

    saving_throws = calculate_saving_throws(
        modifiers, frozenset(character.saving_throw_proficiencies), proficiency_bonus
    )
    skills = calculate_skills(
        modifiers, frozenset(character.skill_proficiencies), proficiency_bonus
    )

    return CharacterSheet(
        name=character.name,
        character_class=character.character_class,
        race=character.race,
        alignment=character.alignment,
        level=character.level,
        proficiency_bonus=proficiency_bonus,
        hit_points=calculate_hit_points(
            character.current_hit_points, modifiers.constitution, character.level
        ),
        armor_class=BASE_ARMOR_CLASS + modifiers.dexterity,
        initiative=modifiers.dexterity,
        ability_scores=character.ability_scores,
        ability_modifiers=modifiers,
        saving_throws=saving_throws,
        skills=skills,
        skill_proficiencies=character.skill_proficiencies,
        saving_throw_proficiencies=character.saving_throw_proficiencies,
        skill_map=SKILL_ABILITY_MAP,
    )


def character_from_sheet(sheet: CharacterSheet, character_id: str) -> Character:
    """Rebuild the stored form from a sheet.

    Only the raw fields are read back; current hit points come from the
    (already clamped) hit_points.current.
    """
    return Character(
        id=character_id,
        name=sheet.name,
        character_class=sheet.character_class,
        race=sheet.race,
        alignment=sheet.alignment,
        level=sheet.level,
        current_hit_points=sheet.hit_points.current,
        ability_scores=sheet.ability_scores,
        skill_proficiencies=sheet.skill_proficiencies,
        saving_throw_proficiencies=sheet.saving_throw_proficiencies,
    )


def unknown_proficiencies(character: Character) -> tuple[list[str], list[str]]:
    """Find proficiency names that match no skill or ability.

    These are ignored by derive_sheet; callers may want to report them.

    Returns:
        Tuple of (unknown skill names, unknown saving throw names)
    """
    skills = [name for name in character.skill_proficiencies if name not in SKILL_ABILITY_MAP]
    saves = [name for name in character.saving_throw_proficiencies if name not in ABILITY_NAMES]
    return skills, saves
