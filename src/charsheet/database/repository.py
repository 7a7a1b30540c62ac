"""Load and store the character for charsheet."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.errors import CharacterNotFoundError
from charsheet.game.character.attributes import AbilityScores
from charsheet.game.character.sheet import Character

from .models.character import CharacterRecord

logger = structlog.get_logger(__name__)

# Character inserted on first start when the table is empty
DEFAULT_CHARACTER = Character(
    id="1",
    name="Elara Swiftwind",
    character_class="Ranger",
    race="Wood Elf",
    alignment="Chaotic Good",
    level=8,
    current_hit_points=65,
    ability_scores=AbilityScores(
        strength=13,
        dexterity=20,
        constitution=15,
        intelligence=17,
        wisdom=17,
        charisma=14,
    ),
    skill_proficiencies=("Acrobatics", "Perception", "Stealth", "Survival"),
    saving_throw_proficiencies=("dexterity", "wisdom"),
)


async def get_character(session: AsyncSession, character_id: str) -> Character:
    """
    Load a stored character.

    Args:
        session: Database session
        character_id: Id of the character to load

    Returns:
        The stored Character

    Raises:
        CharacterNotFoundError: If no row has this id
    """
    record = await session.get(CharacterRecord, character_id)
    if record is None:
        raise CharacterNotFoundError(character_id)
    return record.to_character()


async def save_character(session: AsyncSession, character: Character) -> None:
    """
    Insert or update a character row.

    Args:
        session: Database session
        character: Character to store; its id selects the row
    """
    record = await session.get(CharacterRecord, character.id)
    if record is None:
        session.add(CharacterRecord.from_character(character))
        logger.info("character_created", character_id=character.id)
    else:
        record.update_from(character)
        logger.info("character_updated", character_id=character.id)
    await session.flush()


async def seed_default_character(
    session: AsyncSession, character: Character = DEFAULT_CHARACTER
) -> bool:
    """
    Store the default character unless a row with its id already exists.

    Args:
        session: Database session
        character: Character to seed

    Returns:
        True if the character was inserted, False if it was already present
    """
    if await session.get(CharacterRecord, character.id) is not None:
        return False

    session.add(CharacterRecord.from_character(character))
    await session.flush()
    logger.info("default_character_seeded", character_id=character.id, name=character.name)
    return True
