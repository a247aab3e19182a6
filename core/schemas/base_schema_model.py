"""Base pydantic model shared by every request and response schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Common configuration for API schemas.

    Request payloads may use the editor's camelCase keys (``contentHtml``) or
    snake_case; ``model_dump()`` always produces snake_case. Models can be
    built straight from ORM rows via ``model_validate``.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
