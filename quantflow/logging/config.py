"""
Centralized logging configuration for the QuantFlow signal engine.

structlog sits on top of the standard library logging module. Indicator
functions stay silent; the synthesizer and engine emit one structured record
per recommendation so every signal can be audited after the fact.

The ``logging`` config section decides the processor chain: JSON lines for
log shippers or console output for humans, with optional timestamps and call
sites.
"""
import logging
import sys
from dataclasses import asdict, replace
from typing import Any, Optional

import structlog
from structlog.processors import CallsiteParameter
from structlog.types import FilteringBoundLogger, Processor

from ..config.defaults import LoggingParams
from ..config.validation import ConfigValidator

_CALLSITE_FIELDS = (
    CallsiteParameter.MODULE,
    CallsiteParameter.FUNC_NAME,
    CallsiteParameter.LINENO,
)


def build_processors(
    params: LoggingParams,
    extra_processors: Optional[list[Processor]] = None
) -> list[Processor]:
    """
    Build the structlog processor chain for a ``logging`` config section.

    Enrichment runs first, then any extra processors, and the renderer is
    always last.
    """
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if params.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if params.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(parameters=_CALLSITE_FIELDS))

    processors.extend(extra_processors or [])

    if params.format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        stream = getattr(sys, params.stream)
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    return processors


def configure_logging(
    params: Optional[LoggingParams] = None,
    extra_processors: Optional[list[Processor]] = None,
    **overrides: Any
) -> LoggingParams:
    """
    Configure structlog for the entire application.

    Args:
        params: ``logging`` config section; defaults when omitted
        extra_processors: Additional structlog processors to run before rendering
        **overrides: Individual ``LoggingParams`` fields replacing those of
            ``params``, e.g. ``configure_logging(level="DEBUG")``

    Returns:
        The logging parameters actually applied

    Raises:
        InvalidArgumentError: If the resulting section is invalid
    """
    params = replace(params or LoggingParams(), **overrides)
    ConfigValidator.ensure_valid({"logging": asdict(params)})

    logging.basicConfig(
        level=params.level.upper(),
        stream=getattr(sys, params.stream),
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=build_processors(params, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return params


def configure_from_params(params: LoggingParams) -> LoggingParams:
    """Configure logging from the ``logging`` config section."""
    return configure_logging(params)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal synthesis records.

    Args:
        name: Logger name (typically __name__)
    """
    return get_logger(name).bind(
        subsystem="signals",
        audit_trail=True
    )


def log_signal_decision(
    logger: FilteringBoundLogger,
    action: str,
    confidence: int,
    composite: float,
    dominant_factor: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a synthesized recommendation with standardized fields.

    Args:
        logger: Structlog logger instance
        action: BUY, SELL or HOLD
        confidence: Confidence score 0-100
        composite: Composite score in [-1, 1]
        dominant_factor: Factor with the largest weighted contribution
        context: Additional context data (factor scores, snapshot values)
    """
    bound_logger = logger.bind(
        action=action,
        confidence=confidence,
        composite=round(composite, 6),
        dominant_factor=dominant_factor,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if action == "HOLD":
        bound_logger.debug("Signal synthesized")
    else:
        bound_logger.info("Signal synthesized")
