"""Generate OAuth client id / client secret pairs.

Example:
    >>> from credgen import generate_oauth_credentials
    >>> creds = generate_oauth_credentials(id_prefix="myapp")
    >>> creds.client_id            # myapp_abc123...
    >>> creds.client_secret        # xyz789...
"""

from credgen.domain.error import DomainError, ValidationError
from credgen.domain.model import CredentialPair, GenerationOptions
from credgen.domain.service import (
    CredentialService,
    generate_oauth_credentials,
    generate_random_string,
)
from credgen.domain.value import EncodingFormat
from credgen.util.version import get_version

__version__ = get_version() or "unknown"

__all__ = [
    "generate_oauth_credentials",
    "generate_random_string",
    "CredentialService",
    "CredentialPair",
    "GenerationOptions",
    "EncodingFormat",
    "DomainError",
    "ValidationError",
    "__version__",
]
