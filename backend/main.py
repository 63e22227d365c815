"""
Composition root for the program editor.

Wires settings, the httpx collaborator clients and the editor session
together.

Usage:
    from backend.main import create_editor_session
    from backend.settings import Settings

    # Default session (uses get_settings())
    session = create_editor_session()

    # Test session with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    session = create_editor_session(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk

from application.editor_session import ProgramEditorSession
from backend.settings import Settings, get_settings
from domain.converters import DayNumbering
from domain.ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator
from domain.models import ProgramDocument
from infrastructure import ProgramAPIClient, RoutineCatalogClient, VideoLibraryClient

logger = logging.getLogger(__name__)


def create_editor_session(
    settings: Optional[Settings] = None,
    document: Optional[ProgramDocument] = None,
) -> ProgramEditorSession:
    """
    Create a configured editing session.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        document: Document to edit. A fresh one-week program when omitted.

    Returns:
        ProgramEditorSession talking to the configured services.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    program_api = ProgramAPIClient(
        base_url=settings.program_api_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout_seconds,
    )
    routine_catalog = RoutineCatalogClient(
        base_url=settings.program_api_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout_seconds,
    )
    video_library = VideoLibraryClient(
        base_url=settings.video_library_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout_seconds,
    )

    _log_configuration(settings)

    return ProgramEditorSession(
        program_repo=program_api,
        routine_catalog=routine_catalog,
        video_source=video_library,
        focus_area_source=program_api,
        document=document,
        ids=build_id_generator(settings),
        numbering=settings.day_numbering,
        adjacency=settings.superset_adjacency,
    )


def build_id_generator(settings: Settings) -> IdGenerator:
    """Return the id generator selected by ``settings.id_strategy``."""
    if settings.id_strategy == "sequential":
        return SequentialIdGenerator()
    return UuidIdGenerator()


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for program editor")


def _log_configuration(settings: Settings) -> None:
    """Log editor behaviour settings at startup."""
    logger.info(
        f"Program editor configured: day numbering={settings.day_numbering.value}, "
        f"superset adjacency={settings.superset_adjacency.value}, ids={settings.id_strategy}"
    )
    if settings.day_numbering == DayNumbering.SUNDAY_FIRST:
        logger.warning("=== SUNDAY_FIRST DAY NUMBERING ACTIVE (compatibility mode) ===")
