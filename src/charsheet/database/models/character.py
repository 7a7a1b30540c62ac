"""Stored character table for charsheet."""

from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from charsheet.game.character.attributes import AbilityScores
from charsheet.game.character.sheet import Character

from .base import Base, TimestampMixin


class CharacterRecord(Base, TimestampMixin):
    """Raw character attributes as persisted.

    Only base attributes live here; everything on the sheet is derived at
    read time.
    """

    __tablename__ = "characters"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Opaque character identifier",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # "class" is a Python keyword, so the attribute is renamed
    character_class: Mapped[str] = mapped_column(
        "class",
        String(100),
        nullable=False,
        default="",
    )

    race: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    alignment: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default="1",
        comment="Character level",
    )

    current_hit_points: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Stored current hit points, clamped to the maximum on read",
    )

    # Example: {"strength": 13, "dexterity": 20, ...}
    ability_scores: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Six ability scores keyed by lowercase ability name",
    )

    skill_proficiencies: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        server_default="[]",
        comment="Skill names the character is proficient in",
    )

    saving_throw_proficiencies: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        server_default="[]",
        comment="Lowercase ability names with saving throw proficiency",
    )

    def to_character(self) -> Character:
        """Convert the row to the engine's Character value."""
        return Character(
            id=self.id,
            name=self.name,
            character_class=self.character_class,
            race=self.race,
            alignment=self.alignment,
            level=self.level,
            current_hit_points=self.current_hit_points,
            ability_scores=AbilityScores(**self.ability_scores),
            skill_proficiencies=tuple(self.skill_proficiencies),
            saving_throw_proficiencies=tuple(self.saving_throw_proficiencies),
        )

    def update_from(self, character: Character) -> None:
        """Copy the raw fields of a Character onto this row."""
        self.name = character.name
        self.character_class = character.character_class
        self.race = character.race
        self.alignment = character.alignment
        self.level = character.level
        self.current_hit_points = character.current_hit_points
        self.ability_scores = character.ability_scores.as_dict()
        self.skill_proficiencies = list(character.skill_proficiencies)
        self.saving_throw_proficiencies = list(character.saving_throw_proficiencies)

    @classmethod
    def from_character(cls, character: Character) -> "CharacterRecord":
        """Build a new row from a Character."""
        record = cls(id=character.id)
        record.update_from(character)
        return record

    def __repr__(self) -> str:
        """String representation of CharacterRecord."""
        return f"<CharacterRecord(id='{self.id}', name='{self.name}', level={self.level})>"
