"""Credential assembly domain service."""

from collections.abc import Mapping
from typing import Any

from credgen.domain.model import CredentialPair, GenerationOptions
from credgen.domain.service.random_string import generate_random_string

ID_SEPARATOR = "_"


class CredentialService:
    """Domain service that assembles client id / client secret pairs.

    Stateless; the only shared dependency is the operating system's secure
    random source, so one instance can serve concurrent callers.
    """

    def generate(
        self,
        options: GenerationOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> CredentialPair:
        """Generate a new credential pair.

        All options are validated before any randomness is drawn.

        Args:
            options: Generation options, a mapping of option values, or None
            **overrides: Individual option values (``id_prefix``,
                ``id_length``, ``secret_length``, ``encoding``)

        Returns:
            Credential pair with ``client_id`` = ``{id_prefix}_{random}``

        Raises:
            ValidationError: If any option is invalid
        """
        resolved = GenerationOptions.resolve(options, **overrides)

        random_part = generate_random_string(resolved.id_length, resolved.encoding)
        client_secret = generate_random_string(
            resolved.secret_length, resolved.encoding
        )

        return CredentialPair(
            client_id=f"{resolved.id_prefix}{ID_SEPARATOR}{random_part}",
            client_secret=client_secret,
        )


def generate_oauth_credentials(
    options: GenerationOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> CredentialPair:
    """Generate OAuth client credentials.

    Example:
        >>> creds = generate_oauth_credentials(id_prefix="myapp")
        >>> creds.client_id.startswith("myapp_")
        True
    """
    return CredentialService().generate(options, **overrides)
