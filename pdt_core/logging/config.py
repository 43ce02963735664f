"""
Centralized logging configuration for the compliance core.

This module provides standardized logging configuration using structlog
for all components. Compliance decisions and eligibility transitions carry an
audit_trail flag so downstream log shippers can route them separately.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_compliance_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for PDT compliance decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for compliance decisions
    """
    return get_logger(name).bind(
        subsystem="pdt_compliance",
        audit_trail=True
    )


def log_compliance_decision(
    logger: FilteringBoundLogger,
    account_id: str,
    order_id: str,
    accepted: bool,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an order compliance decision with standardized format.

    Accepted orders are logged at INFO, blocked orders at WARNING.

    Args:
        logger: Structlog logger instance
        account_id: Account the order belongs to
        order_id: ID of the evaluated order
        accepted: Whether the order was accepted
        reason: Short machine-readable reason for the decision
        context: Additional context data
    """
    bound_logger = logger.bind(
        account_id=account_id,
        order_id=order_id,
        decision="ACCEPTED" if accepted else "BLOCKED",
        reason=reason,
        event_type="compliance_decision"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.info("Order accepted")
    else:
        bound_logger.warning("Order blocked")


def log_state_transition(
    logger: FilteringBoundLogger,
    account_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an account eligibility transition with standardized format.

    Args:
        logger: Structlog logger instance
        account_id: Account whose eligibility changed
        from_state: Previous eligibility state
        to_state: New eligibility state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        account_id=account_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
        event_type="state_transition"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Eligibility transition")
