"""Base model for all domain models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable. Fields are declared in snake_case and exposed
    under camelCase aliases, so both ``id_prefix`` and ``idPrefix`` are
    accepted on input and ``model_dump(by_alias=True)`` yields camelCase.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
