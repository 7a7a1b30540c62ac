"""Ability scores, modifiers and proficiency bonus for charsheet.

This module holds the D&D-style arithmetic the sheet is built from. Everything
here is pure: no I/O and no shared mutable state.
"""

from dataclasses import asdict, dataclass
from enum import StrEnum


class AbilityName(StrEnum):
    """The six core abilities, keyed by their lowercase names."""

    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"


# Constant ability names for easy import
ABILITY_NAMES: tuple[str, ...] = tuple(ability.value for ability in AbilityName)


@dataclass(frozen=True)
class AbilityScores:
    """One integer per ability.

    Used both for raw scores and for the derived modifiers, which share the
    same shape. No bounds are enforced here.
    """

    strength: int
    dexterity: int
    constitution: int
    intelligence: int
    wisdom: int
    charisma: int

    def get(self, ability: str) -> int:
        """Look up a value by ability name.

        Args:
            ability: Ability name, case-insensitive (e.g. "Dexterity")

        Returns:
            The value stored for that ability

        Raises:
            KeyError: If the name is not one of the six abilities
        """
        name = ability.lower()
        if name not in ABILITY_NAMES:
            raise KeyError(ability)
        return getattr(self, name)

    def as_dict(self) -> dict[str, int]:
        """Return the values keyed by lowercase ability name."""
        return asdict(self)


def get_modifier(score: int) -> int:
    """Calculate D&D-style ability modifier.

    Floor division is intentional: odd scores below 10 round down.

    Args:
        score: The ability score (typically 1-30, any integer accepted)

    Returns:
        The modifier: (score - 10) // 2

    Examples:
        >>> get_modifier(10)
        0
        >>> get_modifier(9)
        -1
        >>> get_modifier(20)
        5
    """
    return (score - 10) // 2


def get_proficiency_bonus(level: int) -> int:
    """Calculate the level-scaled proficiency bonus.

    Args:
        level: Character level (1+ for the usual progression)

    Returns:
        2 + (level - 1) // 4, so levels 1-4 give +2 and level 20 gives +6
    """
    return 2 + (level - 1) // 4


def calculate_modifiers(scores: AbilityScores) -> AbilityScores:
    """Calculate all ability modifiers.

    Args:
        scores: The raw ability scores

    Returns:
        AbilityScores holding one modifier per ability
    """
    return AbilityScores(
        strength=get_modifier(scores.strength),
        dexterity=get_modifier(scores.dexterity),
        constitution=get_modifier(scores.constitution),
        intelligence=get_modifier(scores.intelligence),
        wisdom=get_modifier(scores.wisdom),
        charisma=get_modifier(scores.charisma),
    )
