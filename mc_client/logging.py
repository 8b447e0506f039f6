"""
Structured logging configuration.

Console output in development, JSON lines otherwise. Logs go to stderr so
they never mix with command output on stdout.
"""

import logging
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger

from mc_client.config import Settings


def make_add_component_processor(
    component: str,
) -> structlog.types.Processor:
    """
    Create a processor that adds a static component field to log entries.

    Parameters
    ----------
    component : str
        Component name to add (e.g., "cli").

    Returns
    -------
    structlog.types.Processor
        Processor function that adds the component field.
    """

    def add_component(
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict["component"] = component
        return event_dict

    return add_component


def configure_logging(settings: Settings, component: str | None = None) -> None:
    """
    Configure structlog and route standard logging through it.

    Parameters
    ----------
    settings : Settings
        Provides ``environment`` (renderer choice) and ``log_level``.
    component : str | None
        Component name to include in all log entries (e.g., "cli").
    """
    json_logs = settings.environment != "development"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # Foreign (stdlib) records get the component too
    if component:
        shared_processors.append(make_add_component_processor(component))

    if json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)  # pydantic and other dependencies

    logging.getLogger("mc_client").setLevel(getattr(logging, settings.log_level, logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).

    Returns
    -------
    structlog.stdlib.BoundLogger
        Configured logger.
    """
    return structlog.get_logger(name)
