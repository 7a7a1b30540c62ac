"""Tests for the character table and repository functions."""

import dataclasses

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from charsheet.database.models import CharacterRecord
from charsheet.database.repository import (
    DEFAULT_CHARACTER,
    get_character,
    save_character,
    seed_default_character,
)
from charsheet.errors import CharacterNotFoundError
from charsheet.game.character import derive_sheet


class TestCharacterRecord:
    """Tests for CharacterRecord model."""

    async def test_round_trip(self, db_session: AsyncSession, ranger):
        """Every raw field survives a write and read."""
        db_session.add(CharacterRecord.from_character(ranger))
        await db_session.commit()

        result = await db_session.execute(select(CharacterRecord).where(CharacterRecord.id == "1"))
        record = result.scalar_one()

        assert record.to_character() == ranger
        assert record.created_at is not None
        assert record.updated_at is not None

    async def test_timestamps_track_edits(self, db_session: AsyncSession, ranger):
        await save_character(db_session, ranger)
        await db_session.commit()
        record = await db_session.get(CharacterRecord, "1")
        created, first_update = record.created_at, record.updated_at
        assert created is not None

        await save_character(db_session, dataclasses.replace(ranger, level=9))
        await db_session.commit()

        assert record.created_at == created
        assert record.updated_at >= first_update

    def test_primary_key_name(self):
        assert CharacterRecord.__table__.primary_key.name == "pk_characters"

    async def test_class_column_name(self, db_session: AsyncSession):
        assert "class" in CharacterRecord.__table__.c
        assert CharacterRecord.character_class.property.columns[0].name == "class"

    def test_repr(self, ranger):
        record = CharacterRecord.from_character(ranger)
        assert repr(record) == "<CharacterRecord(id='1', name='Elara Swiftwind', level=8)>"


class TestRepository:
    async def test_get_missing_character(self, db_session: AsyncSession):
        with pytest.raises(CharacterNotFoundError) as exc_info:
            await get_character(db_session, "missing")
        assert exc_info.value.character_id == "missing"

    async def test_save_inserts_then_updates(self, db_session: AsyncSession, ranger):
        await save_character(db_session, ranger)
        await db_session.commit()

        updated = dataclasses.replace(
            ranger, level=9, current_hit_points=12, skill_proficiencies=("Arcana",)
        )
        await save_character(db_session, updated)
        await db_session.commit()

        loaded = await get_character(db_session, "1")
        assert loaded.level == 9
        assert loaded.current_hit_points == 12
        assert loaded.skill_proficiencies == ("Arcana",)

        count = await db_session.execute(select(CharacterRecord))
        assert len(count.scalars().all()) == 1

    async def test_stored_hp_is_not_clamped(self, db_session: AsyncSession, ranger):
        """Clamping happens on derivation; the store keeps the raw value."""
        await save_character(db_session, ranger)
        await db_session.commit()

        loaded = await get_character(db_session, "1")
        assert loaded.current_hit_points == 65
        assert derive_sheet(loaded).hit_points.current == 24

    async def test_unknown_proficiencies_are_stored(self, db_session: AsyncSession, ranger):
        character = dataclasses.replace(ranger, skill_proficiencies=("Cooking",))
        await save_character(db_session, character)
        await db_session.commit()

        loaded = await get_character(db_session, "1")
        assert loaded.skill_proficiencies == ("Cooking",)


class TestSeeding:
    async def test_seed_inserts_default(self, db_session: AsyncSession):
        assert await seed_default_character(db_session) is True
        await db_session.commit()

        loaded = await get_character(db_session, DEFAULT_CHARACTER.id)
        assert loaded == DEFAULT_CHARACTER

    async def test_seed_keeps_existing_row(self, db_session: AsyncSession, ranger):
        edited = dataclasses.replace(ranger, name="Renamed")
        await save_character(db_session, edited)
        await db_session.commit()

        assert await seed_default_character(db_session) is False
        loaded = await get_character(db_session, "1")
        assert loaded.name == "Renamed"
