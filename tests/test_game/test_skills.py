"""Tests for the skill reference table."""

import pytest

from charsheet.game.character.attributes import ABILITY_NAMES, AbilityName
from charsheet.game.character.skills import (
    SKILL_ABILITY_MAP,
    SKILL_NAMES,
    get_skill_ability,
)

EXPECTED_TABLE = {
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


class TestSkillTable:
    def test_table_contents(self):
        assert dict(SKILL_ABILITY_MAP) == EXPECTED_TABLE
        assert len(SKILL_NAMES) == 17

    def test_every_skill_maps_to_an_ability(self):
        for ability in SKILL_ABILITY_MAP.values():
            assert ability.lower() in ABILITY_NAMES

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SKILL_ABILITY_MAP["Cooking"] = "Wisdom"  # type: ignore[index]

    def test_get_skill_ability(self):
        assert get_skill_ability("Sleight of Hand") == AbilityName.DEXTERITY
        assert get_skill_ability("Athletics") == AbilityName.STRENGTH

    def test_get_skill_ability_is_exact_match(self):
        with pytest.raises(KeyError):
            get_skill_ability("stealth")

    def test_investigation_naming(self):
        """The intelligence skill is keyed "Investigation", never "Analysis"."""
        assert get_skill_ability("Investigation") == AbilityName.INTELLIGENCE
        assert "Analysis" not in SKILL_ABILITY_MAP
        assert "Analysis/Investigation" not in SKILL_ABILITY_MAP
