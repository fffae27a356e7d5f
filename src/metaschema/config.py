"""Validator configuration toggles consulted during keyword dispatch.

Example:
    >>> config = ValidatorsConfig(openapi3_style_discriminators=True)
    >>> config.custom_message_supported
    True
"""

from __future__ import annotations

import os

from pydantic import Field

from metaschema.models.base import MetaSchemaBaseModel
from metaschema.models.constants import TRUTHY_VALUES

ENV_CUSTOM_MESSAGE_SUPPORTED = "METASCHEMA_CUSTOM_MESSAGE_SUPPORTED"
ENV_OPENAPI3_DISCRIMINATORS = "METASCHEMA_OPENAPI3_DISCRIMINATORS"
ENV_STRICT_FORMATS = "METASCHEMA_STRICT_FORMATS"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_VALUES


class ValidatorsConfig(MetaSchemaBaseModel):
    """Options shared by every compilation that uses a meta-schema.

    Attributes:
        custom_message_supported: Treat the ``message`` keyword as a custom
            error message container instead of an unknown keyword.
        openapi3_style_discriminators: Resolve the OpenAPI 3 ``discriminator``
            keyword even when the meta-schema does not register it.
        strict_formats: Report format names that no registered format knows.
    """

    custom_message_supported: bool = Field(
        default=True,
        description="Ignore the 'message' keyword as a custom message container",
    )
    openapi3_style_discriminators: bool = Field(
        default=False,
        description="Enable OpenAPI 3 discriminator handling",
    )
    strict_formats: bool = Field(
        default=False,
        description="Report unknown format names as validation messages",
    )

    @classmethod
    def from_env(cls) -> ValidatorsConfig:
        """Build a config from METASCHEMA_* environment variables, falling back to defaults."""
        return cls(
            custom_message_supported=_env_flag(ENV_CUSTOM_MESSAGE_SUPPORTED, True),
            openapi3_style_discriminators=_env_flag(ENV_OPENAPI3_DISCRIMINATORS, False),
            strict_formats=_env_flag(ENV_STRICT_FORMATS, False),
        )
