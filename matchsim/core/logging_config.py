"""Structured logging for simulation runs.

Library modules log through ``logging.getLogger(__name__)``; the CLI calls
``setup_logging`` once so those records are rendered by structlog, either
as JSON lines or as plain console text. Records go to stderr by default so
the report on stdout stays clean. Each run's id and parameters are bound
as context variables and attached to every record emitted during the run.
"""

import logging
import sys
import uuid
from typing import Any, TextIO

import structlog


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    # filter_by_level needs a real logger, which stdlib records lack
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    json_output: bool = False,
    log_level: str = "WARNING",
    stream: TextIO | None = None,
) -> None:
    """Route stdlib and structlog logging through one structured handler.

    Args:
        json_output: Render JSON lines instead of console text.
        log_level: Root log level name; unknown names fall back to WARNING.
        stream: Destination (defaults to the current ``sys.stderr``).
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # joblib's worker pool is chatty at DEBUG
    logging.getLogger("joblib").setLevel(logging.WARNING)


def generate_run_id() -> str:
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:12]


def bind_run_context(**values: Any) -> str:
    """Start a run context, returning its run id."""
    run_id = generate_run_id()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(run_id=run_id, **values)
    return run_id


def clear_run_context() -> None:
    structlog.contextvars.clear_contextvars()
