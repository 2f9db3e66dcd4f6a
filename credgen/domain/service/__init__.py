"""Domain services."""

from credgen.domain.service.credential_service import (
    CredentialService,
    generate_oauth_credentials,
)
from credgen.domain.service.random_string import (
    generate_random_string,
    required_bytes,
)

__all__ = [
    "CredentialService",
    "generate_oauth_credentials",
    "generate_random_string",
    "required_bytes",
]
