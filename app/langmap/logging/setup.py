"""Structlog configuration and logger setup for langmap.

Translation lookups run in rendering paths, so the logging setup stays
small: one processor chain, a console renderer while developing and JSON
in production. Output is silenced entirely under pytest.

Usage:
    from langmap.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("language_loaded", code="en")
"""

import inspect
import logging
import sys
from types import FrameType, ModuleType
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from langmap.configuration import Settings
from langmap.configuration import settings as default_settings

# Above CRITICAL: nothing reaches the handlers
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _base_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(prod_mode: bool) -> Processor:
    if prod_mode:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _configure_structlog(processors: List[Processor]) -> None:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard logging module.

    Args:
        settings: Source of LOG_LEVEL and production mode (default: the
            module settings singleton).
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; selects JSON
            output instead of the console renderer.

    Returns:
        A logger bound to the new configuration.
    """
    settings = settings or default_settings

    if _is_test_environment():
        # Loggers must still be usable, they just never emit
        logging.root.setLevel(SILENT_LEVEL)
        _configure_structlog(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ]
        )
        logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
        return structlog.stdlib.get_logger()

    prod_mode = settings.is_production if is_production is None else is_production
    _configure_structlog(_base_processors() + [_renderer(prod_mode)])

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _calling_module(frame: Optional[FrameType]) -> Optional[ModuleType]:
    """Resolve the module of the caller's caller, if it can be found."""
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return None
    return inspect.getmodule(caller)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Return a logger bound to ``logger_name``.

    Without ``name`` the calling module's dotted name is used.
    """
    if name:
        return logger.bind(logger_name=name)

    module = _calling_module(inspect.currentframe())
    return logger.bind(logger_name=module.__name__ if module else "unknown")


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    The logger carries ``component`` (last dotted part of the module name)
    and ``module_path``. In ``langmap/i18n/translator.py`` that is
    ``{"component": "translator", "module_path": "langmap.i18n.translator"}``.
    """
    module = _calling_module(inspect.currentframe())
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
