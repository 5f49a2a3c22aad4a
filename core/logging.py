"""
Structured Logging Configuration

structlog drives every log line in the service. Request-scoped fields
(the correlation ID) live in structlog's contextvars, so anything logged
while a request is in flight carries them, including lines from worker
threads started with a copied context.

Standard library loggers (uvicorn, peewee) are routed through the same
renderer, so the whole process emits one format.
"""

import logging
import sys
from typing import Any, Optional

import structlog

from core.settings import Settings, settings


def set_correlation_id(cid: str) -> None:
    """Bind the correlation ID for the rest of the current context."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=cid)


def add_service_info(service_name: str) -> structlog.typing.Processor:
    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["service"] = service_name
        return event_dict

    return processor


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure structlog and the stdlib root logger from settings.

    Args:
        config: Settings to read LOG_LEVEL, LOG_FORMAT, LOG_SQL and
            SERVICE_NAME from (defaults to the process settings)
    """
    config = config or settings
    level = getattr(logging, config.log_level)

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_info(config.service_name),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_format == "json":
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
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
    root.handlers = [handler]
    root.setLevel(level)

    # peewee logs every statement at DEBUG
    logging.getLogger("peewee").setLevel(logging.DEBUG if config.log_sql else logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """
    Get a logger for one component.

    Example:
        log = get_logger("aggregation")
        log.info("career_summary_built", player="LeBron James", games_played=1492)
    """
    return structlog.get_logger(name)
