"""Exceptions raised at the storage and configuration boundaries of charsheet."""


class CharSheetError(Exception):
    """Base class for charsheet errors."""

    pass


class CharacterNotFoundError(CharSheetError):
    """Raised when the stored character cannot be found."""

    def __init__(self, character_id: str) -> None:
        super().__init__(f"Character {character_id!r} not found")
        self.character_id = character_id


class ConfigError(CharSheetError):
    """Raised when the application config file cannot be loaded."""

    pass
