"""Generation options.

Options are resolved before they are validated: every omitted field takes
its default, and the checks then run against the effective values in
declaration order (prefix, id length, secret length, encoding). The first
failing check is the one reported.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from credgen.domain.error import ValidationError
from credgen.domain.model.common import DomainModel
from credgen.domain.value import EncodingFormat

DEFAULT_ID_PREFIX = "oauth"
DEFAULT_ID_LENGTH = 24
DEFAULT_SECRET_LENGTH = 48
DEFAULT_ENCODING = EncodingFormat.BASE64URL


def _invalid(field: str, template: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_option", template, {"field": field})


def _positive_integer(value: Any, field: str) -> int:
    """Accept ints >= 1 and integral floats >= 1; reject bools."""
    if not isinstance(value, bool):
        if isinstance(value, int) and value >= 1:
            return value
        if isinstance(value, float) and value.is_integer() and value >= 1:
            return int(value)
    raise _invalid(field, "{field} must be a positive integer")


class GenerationOptions(DomainModel):
    """Options for generating a client id / client secret pair.

    Attributes:
        id_prefix: Prefix placed before the ``_`` separator of the client id
        id_length: Length of the random part of the client id
        secret_length: Length of the client secret
        encoding: Text encoding used for both random parts
    """

    model_config = ConfigDict(extra="forbid")

    id_prefix: str = DEFAULT_ID_PREFIX
    id_length: int = DEFAULT_ID_LENGTH
    secret_length: int = DEFAULT_SECRET_LENGTH
    encoding: EncodingFormat = DEFAULT_ENCODING

    @field_validator("id_prefix", mode="before")
    @classmethod
    def validate_id_prefix(cls, v: Any) -> str:
        if not isinstance(v, str) or len(v) < 1:
            raise _invalid("id_prefix", "{field} must be a non-empty string")
        return v

    @field_validator("id_length", "secret_length", mode="before")
    @classmethod
    def validate_length(cls, v: Any, info: ValidationInfo) -> int:
        return _positive_integer(v, info.field_name)

    @field_validator("encoding", mode="before")
    @classmethod
    def validate_encoding(cls, v: Any) -> EncodingFormat:
        if isinstance(v, EncodingFormat):
            return v
        if isinstance(v, str) and v in EncodingFormat.choices():
            return EncodingFormat(v)
        raise _invalid(
            "encoding",
            "{field} must be one of: " + ", ".join(EncodingFormat.choices()),
        )

    @classmethod
    def resolve(
        cls,
        options: "GenerationOptions | Mapping[str, Any] | None" = None,
        **overrides: Any,
    ) -> "GenerationOptions":
        """Build validated options from an optional base plus overrides.

        Args:
            options: Existing options, a mapping of option values (snake_case
                or camelCase keys), or None for all defaults
            **overrides: Individual option values that take precedence

        Returns:
            Fully resolved and validated options

        Raises:
            ValidationError: If any option is invalid; the first failing
                option in declaration order is reported
        """
        if isinstance(options, GenerationOptions) and not overrides:
            return options

        if options is None:
            values: dict[str, Any] = {}
        elif isinstance(options, GenerationOptions):
            values = options.model_dump()
        elif isinstance(options, Mapping):
            values = cls._by_field_name(options)
        else:
            raise ValidationError(
                "options", "options must be a mapping or GenerationOptions"
            )
        values.update(cls._by_field_name(overrides))

        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            raise _to_domain_error(e) from None

    @classmethod
    def _by_field_name(cls, values: Mapping[str, Any]) -> dict[str, Any]:
        """Rewrite camelCase alias keys to field names."""
        aliases = {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias
        }
        return {aliases.get(key, key): value for key, value in values.items()}


def _to_domain_error(error: PydanticValidationError) -> ValidationError:
    first = error.errors()[0]
    ctx = first.get("ctx") or {}
    if "field" in ctx:
        return ValidationError(ctx["field"], first["msg"])

    # extra="forbid" reports unknown keys with their own error type
    name = str(first["loc"][0]) if first["loc"] else "options"
    if first["type"] == "extra_forbidden":
        return ValidationError(name, f"{name} is not a recognized option")
    return ValidationError(name, first["msg"])
