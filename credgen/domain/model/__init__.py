"""Domain models for credgen."""

from credgen.domain.model.credentials import CredentialPair
from credgen.domain.model.options import (
    DEFAULT_ENCODING,
    DEFAULT_ID_LENGTH,
    DEFAULT_ID_PREFIX,
    DEFAULT_SECRET_LENGTH,
    GenerationOptions,
)

__all__ = [
    "CredentialPair",
    "GenerationOptions",
    "DEFAULT_ID_PREFIX",
    "DEFAULT_ID_LENGTH",
    "DEFAULT_SECRET_LENGTH",
    "DEFAULT_ENCODING",
]
