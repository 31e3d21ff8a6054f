"""Process entry point: loads .env, configures logging, builds the configured curve."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from hilbertspace.config import Settings, get_settings
from hilbertspace.registry import SpaceFillingCurve, get_registry

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.hilbertspace_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_space(settings: Settings | None = None) -> SpaceFillingCurve:
    """Build the curve named in settings. Invalid orders raise the usual construction errors."""
    if settings is None:
        settings = get_settings()
    _register_curves()
    space = get_registry().create(
        settings.hilbertspace_default_curve,
        settings.hilbertspace_default_order,
        vertical_compatible=settings.hilbertspace_vertical_compatible,
    )
    logger.info(
        "Created %s curve, dimensions %s",
        settings.hilbertspace_default_curve,
        space.dimensions(),
    )
    return space


def _register_curves() -> None:
    """Import curve modules so @curve decorators fire."""
    import hilbertspace.hilbert  # noqa: F401
