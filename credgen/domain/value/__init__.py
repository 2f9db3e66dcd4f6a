"""Domain value objects for credgen."""

from credgen.domain.value.types import EncodingFormat

__all__ = [
    "EncodingFormat",
]
