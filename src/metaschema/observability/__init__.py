"""Observability module for metaschema.

Structured logging for meta-schema assembly and validator dispatch.

Example:
    >>> from metaschema.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.debug("metaschema.built", uri="https://example.com/dialect")
"""

from metaschema.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
