"""JSON request and response bodies for the charsheet API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from charsheet.game.character.attributes import AbilityScores
from charsheet.game.character.sheet import Character, CharacterSheet


class CamelModel(BaseModel):
    """Base model serialising fields with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AbilityScoresSchema(CamelModel):
    """Six integer ability values.

    Only JSON integers are accepted: "8" and 8.0 are rejected.
    """

    strength: StrictInt
    dexterity: StrictInt
    constitution: StrictInt
    intelligence: StrictInt
    wisdom: StrictInt
    charisma: StrictInt

    @classmethod
    def from_scores(cls, scores: AbilityScores) -> "AbilityScoresSchema":
        return cls(**scores.as_dict())

    def to_scores(self) -> AbilityScores:
        return AbilityScores(**self.model_dump())


class HitPointsSchema(CamelModel):
    current: int
    max: int


class HitPointsUpdate(CamelModel):
    """Hit points as sent back by the client; max is derived and ignored."""

    current: StrictInt
    max: StrictInt | None = None


class CharacterUpdate(CamelModel):
    """Edit payload for the stored character.

    Mirrors the sheet shape so a client can post back what it received.
    Unknown proficiency names are accepted and simply have no effect.
    """

    name: StrictStr
    character_class: StrictStr = Field(alias="class")
    race: StrictStr
    alignment: StrictStr
    level: StrictInt
    hit_points: HitPointsUpdate
    ability_scores: AbilityScoresSchema
    skill_proficiencies: list[StrictStr] = Field(default_factory=list)
    saving_throw_proficiencies: list[StrictStr] = Field(default_factory=list)

    def to_character(self, character_id: str) -> Character:
        """Build the stored form for the given id."""
        return Character(
            id=character_id,
            name=self.name,
            character_class=self.character_class,
            race=self.race,
            alignment=self.alignment,
            level=self.level,
            current_hit_points=self.hit_points.current,
            ability_scores=self.ability_scores.to_scores(),
            skill_proficiencies=tuple(self.skill_proficiencies),
            saving_throw_proficiencies=tuple(self.saving_throw_proficiencies),
        )


class CharacterSheetResponse(CamelModel):
    """The derived character sheet."""

    name: str
    character_class: str = Field(alias="class")
    race: str
    alignment: str
    level: int
    proficiency_bonus: int
    hit_points: HitPointsSchema
    armor_class: int
    initiative: int
    ability_scores: AbilityScoresSchema
    ability_modifiers: AbilityScoresSchema
    saving_throws: dict[str, int]
    skills: dict[str, int]
    skill_map: dict[str, str]
    skill_proficiencies: list[str]
    saving_throw_proficiencies: list[str]

    @classmethod
    def from_sheet(cls, sheet: CharacterSheet) -> "CharacterSheetResponse":
        """Build the response body from a derived sheet."""
        return cls(
            name=sheet.name,
            character_class=sheet.character_class,
            race=sheet.race,
            alignment=sheet.alignment,
            level=sheet.level,
            proficiency_bonus=sheet.proficiency_bonus,
            hit_points=HitPointsSchema(current=sheet.hit_points.current, max=sheet.hit_points.max),
            armor_class=sheet.armor_class,
            initiative=sheet.initiative,
            ability_scores=AbilityScoresSchema.from_scores(sheet.ability_scores),
            ability_modifiers=AbilityScoresSchema.from_scores(sheet.ability_modifiers),
            saving_throws=dict(sheet.saving_throws),
            skills=dict(sheet.skills),
            skill_map=dict(sheet.skill_map),
            skill_proficiencies=list(sheet.skill_proficiencies),
            saving_throw_proficiencies=list(sheet.saving_throw_proficiencies),
        )


class HealthResponse(BaseModel):
    status: str
    message: str
