"""Constants for metaschema.

Reserved keyword names and defaults shared across the package.
"""

FORMAT_KEYWORD = "format"
"""Reserved keyword slot owned by the format keyword factory.

Callers customise format checking through formats or a format keyword
factory; a plain keyword registered under this name is rejected.
"""

MESSAGE_KEYWORD = "message"
"""Custom error message keyword, ignored when custom messages are supported."""

DISCRIMINATOR_KEYWORD = "discriminator"
"""OpenAPI 3 discriminator keyword, resolved outside the keyword registry."""

DEFAULT_ID_KEYWORD = "id"

ANCHOR_KEYWORD = "$anchor"
DYNAMIC_ANCHOR_KEYWORD = "$dynamicAnchor"

# Truthy strings accepted by environment-driven configuration
TRUTHY_VALUES = frozenset({"true", "1", "yes", "on"})
