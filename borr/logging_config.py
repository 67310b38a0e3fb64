# borr/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from borr.config import LogFormat, settings


def get_logger(name: str):
    """
    Returns a structlog logger backed by the standard library logger `name`.

    Events pass through the stdlib `borr` logger, which carries a
    NullHandler, so a host that never configures logging sees nothing.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    Host applications that trace their requests get parser logs linked to them.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs or colored text logs.

    The library itself never calls this; applications (and the CLI) do.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    fmt = LogFormat(log_format) if log_format else settings.LOG_FORMAT

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt is LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # May be reconfigured more than once per process.
        cache_logger_on_first_use=False,
    )

    # Logs go to stderr so CLI output on stdout stays clean.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level_name,
    )
    logging.getLogger("borr").setLevel(level_name)
