"""Base Pydantic model configuration for metaschema models.

All metaschema models inherit from MetaSchemaBaseModel to ensure consistent behavior:
- Immutability (frozen=True) so configurations can be shared across threads
- Strict validation (extra="forbid") to catch typos in option names
- Flexible field naming (populate_by_name=True) for alias support
"""

from pydantic import BaseModel, ConfigDict


class MetaSchemaBaseModel(BaseModel):
    """Base model for all metaschema value objects.

    Example:
        >>> class Toggle(MetaSchemaBaseModel):
        ...     name: str
        ...     enabled: bool = True
        >>>
        >>> Toggle(name="format").enabled
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=False,
        validate_default=True,
        validate_assignment=True,
    )
