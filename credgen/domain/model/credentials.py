"""Credential pair entity."""

from pydantic import Field

from credgen.domain.model.common import DomainModel


class CredentialPair(DomainModel):
    """Generated OAuth client credentials.

    Both values are opaque random strings drawn independently; neither is
    derived from the other. Serializes as ``{"clientId", "clientSecret"}``
    with ``model_dump(by_alias=True)``.
    """

    client_id: str  # "{prefix}_{random part}"
    client_secret: str = Field(repr=False)
