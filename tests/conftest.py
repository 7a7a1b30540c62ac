"""Shared fixtures for all tests."""

import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from charsheet.database.models import Base
from charsheet.game.character import AbilityScores, Character


def _reset_engine() -> None:
    import charsheet.database.engine as engine_module
    from charsheet.config import get_settings

    engine_module._engine = None
    engine_module._async_session_factory = None
    get_settings.cache_clear()


# Point settings at a throwaway database before anything caches them
@pytest.fixture(scope="session", autouse=True)
def use_test_database(tmp_path_factory):
    """Force all tests to use a temporary database instead of ./data.

    The temp directory is cleaned up by pytest.
    """
    test_db_path = tmp_path_factory.mktemp("charsheet_test") / "test_charsheet.db"
    os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"
    _reset_engine()

    yield

    _reset_engine()


@pytest.fixture
def fresh_database(tmp_path, monkeypatch):
    """Give a single test its own empty on-disk database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'charsheet.db'}")
    _reset_engine()

    yield tmp_path / "charsheet.db"

    _reset_engine()


@pytest.fixture
async def db_session():
    """Create a test database session with in-memory SQLite."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


@pytest.fixture
def ranger() -> Character:
    """Level 8 ranger used throughout the sheet tests."""
    return Character(
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


@pytest.fixture
def average_character() -> Character:
    """Level 1 character with every score at 10 and no proficiencies."""
    return Character(
        id="avg",
        name="Average Joe",
        character_class="Fighter",
        race="Human",
        alignment="True Neutral",
        level=1,
        current_hit_points=8,
        ability_scores=AbilityScores(
            strength=10,
            dexterity=10,
            constitution=10,
            intelligence=10,
            wisdom=10,
            charisma=10,
        ),
    )
