"""Metaschema Error Taxonomy.

This module defines the error hierarchy for meta-schema assembly and
validator dispatch, providing structured error handling with specific
error codes and context information.
"""
from __future__ import annotations

from typing import Any


class MetaSchemaError(Exception):
    """Base exception for all metaschema errors.

    Attributes:
        code: Error code following the metaschema:<area>/<kind> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidMetaSchemaError(MetaSchemaError):
    """Raised when a meta-schema configuration cannot be built.

    This error occurs synchronously while staging or building a
    meta-schema: blank URI or id keyword, a missing keyword map, an
    attempt to replace the reserved ``format`` keyword directly, or a
    blueprint that carries no format keyword. It is never retried.

    Attributes:
        reason: Short description of what is wrong with the configuration
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="metaschema:config/invalid",
            message=f"Invalid meta-schema: {reason}",
            details=details or {},
        )
        self.reason = reason


class SchemaConstructionError(MetaSchemaError):
    """Raised when a keyword fails to construct its validator.

    Keywords raise this directly to report a malformed schema subtree.
    Any other exception escaping a keyword is wrapped into this type by
    the dispatcher, with the original exception kept as ``cause``.

    Attributes:
        keyword: The keyword whose validator could not be constructed
        cause: The underlying exception, if any
    """

    def __init__(
        self,
        keyword: str,
        message: str | None = None,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            message = f"Could not construct validator for keyword '{keyword}'"
            if cause is not None:
                message = f"{message}: {cause}"
        details_dict: dict[str, Any] = {"keyword": keyword}
        if cause is not None:
            details_dict["cause"] = type(cause).__name__
        if details:
            details_dict.update(details)
        super().__init__(
            code="metaschema:keyword/construction_failed",
            message=message,
            details=details_dict,
        )
        self.keyword = keyword
        self.cause = cause
