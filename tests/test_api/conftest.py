"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from charsheet.api import create_app
from charsheet.config import AppConfig


@pytest.fixture
def client(fresh_database):
    """Test client with a fresh database, running the app lifespan."""
    app = create_app(app_config=AppConfig(welcome_message="Welcome, adventurer!"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def edit_payload() -> dict:
    """Sheet-shaped edit body as the web client sends it."""
    return {
        "name": "Elara Swiftwind",
        "class": "Ranger",
        "race": "Wood Elf",
        "alignment": "Chaotic Good",
        "level": 8,
        "hitPoints": {"current": 65, "max": 24},
        "abilityScores": {
            "strength": 13,
            "dexterity": 20,
            "constitution": 15,
            "intelligence": 17,
            "wisdom": 17,
            "charisma": 14,
        },
        "skillProficiencies": ["Acrobatics", "Perception", "Stealth", "Survival"],
        "savingThrowProficiencies": ["dexterity", "wisdom"],
    }
