"""FastAPI application serving the character sheet."""

import dataclasses
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from charsheet import __version__
from charsheet.api.schemas import CharacterSheetResponse, CharacterUpdate, HealthResponse
from charsheet.config import AppConfig, Settings, get_settings, load_app_config
from charsheet.database.engine import close_db, get_session, init_db
from charsheet.database.repository import (
    DEFAULT_CHARACTER,
    get_character,
    save_character,
    seed_default_character,
)
from charsheet.errors import CharacterNotFoundError
from charsheet.game.character.sheet import CharacterSheet, derive_sheet, unknown_proficiencies

logger = structlog.get_logger(__name__)


class CharSheetApp:
    """Wires settings, storage and routes into a FastAPI application."""

    def __init__(self, settings: Settings | None = None, app_config: AppConfig | None = None):
        self.settings = settings or get_settings()
        self.app_config = app_config

    async def startup(self) -> None:
        """Load the app config, create tables and seed the character."""
        if self.app_config is None:
            self.app_config = load_app_config(self.settings)

        await init_db()
        async with get_session() as session:
            await seed_default_character(
                session, dataclasses.replace(DEFAULT_CHARACTER, id=self.settings.character_id)
            )

        logger.info("charsheet_api_started", version=__version__)

    async def shutdown(self) -> None:
        await close_db()
        logger.info("charsheet_api_stopped")

    async def load_sheet(self) -> CharacterSheet:
        """Read the stored character and derive its sheet."""
        async with get_session() as session:
            character = await get_character(session, self.settings.character_id)

        sheet = derive_sheet(character)
        logger.debug("character_loaded", character_id=character.id, level=character.level)
        return sheet

    def create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            await self.startup()
            yield
            await self.shutdown()

        app = FastAPI(
            title="charsheet",
            description="Derived tabletop character sheet",
            version=__version__,
            lifespan=lifespan,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.allowed_origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type"],
        )
        logger.info("cors_configured", origins=self.settings.allowed_origins)

        self._register_routes(app)
        self._register_exception_handlers(app)
        return app

    def _register_routes(self, app: FastAPI) -> None:
        @app.get("/api/health", response_model=HealthResponse, tags=["system"])
        async def health_check() -> HealthResponse:
            """Liveness check with the configured welcome message."""
            message = self.app_config.welcome_message if self.app_config else ""
            return HealthResponse(status="ok", message=message)

        @app.get("/api/character", response_model=CharacterSheetResponse, tags=["character"])
        async def read_character() -> CharacterSheetResponse:
            """Return the derived sheet of the stored character."""
            sheet = await self.load_sheet()
            return CharacterSheetResponse.from_sheet(sheet)

        @app.post("/api/character", response_model=CharacterSheetResponse, tags=["character"])
        async def update_character(payload: CharacterUpdate) -> CharacterSheetResponse:
            """Store the edited raw fields and return the re-derived sheet."""
            character = payload.to_character(self.settings.character_id)

            unknown_skills, unknown_saves = unknown_proficiencies(character)
            if unknown_skills or unknown_saves:
                logger.warning(
                    "unknown_proficiencies_ignored",
                    character_id=character.id,
                    skills=unknown_skills,
                    saving_throws=unknown_saves,
                )

            async with get_session() as session:
                await save_character(session, character)

            sheet = await self.load_sheet()
            return CharacterSheetResponse.from_sheet(sheet)

    def _register_exception_handlers(self, app: FastAPI) -> None:
        @app.exception_handler(RequestValidationError)
        async def validation_error_handler(
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            details = [
                {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
                for error in exc.errors()
            ]
            logger.warning(
                "invalid_request",
                path=request.url.path,
                method=request.method,
                errors=details,
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "error": "invalid_request",
                    "message": "Request body could not be decoded",
                    "path": request.url.path,
                    "details": details,
                },
            )

        @app.exception_handler(CharacterNotFoundError)
        async def not_found_handler(request: Request, exc: CharacterNotFoundError) -> JSONResponse:
            logger.error("character_not_found", character_id=exc.character_id)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "character_not_found",
                    "message": str(exc),
                    "path": request.url.path,
                },
            )

        @app.exception_handler(SQLAlchemyError)
        async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
            logger.error(
                "persistence_error",
                path=request.url.path,
                method=request.method,
                error=str(exc),
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "persistence_error",
                    "message": "Character storage is unavailable",
                    "path": request.url.path,
                },
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
            logger.error(
                "unhandled_exception",
                path=request.url.path,
                method=request.method,
                error=str(exc),
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "internal_error",
                    "message": "An internal error occurred",
                    "path": request.url.path,
                },
            )


def create_app(settings: Settings | None = None, app_config: AppConfig | None = None) -> FastAPI:
    """Create the charsheet FastAPI application."""
    return CharSheetApp(settings, app_config).create_app()
