"""Generate credentials use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from credgen.application.usecase.base import BaseUseCase
from credgen.domain.error import ValidationError
from credgen.domain.model import CredentialPair
from credgen.domain.service import CredentialService


class GenerateCredentialsRequest(BaseModel):
    """Request to generate one credential pair.

    Values are passed through unvalidated; the domain service owns
    validation and its error messages.
    """

    id_prefix: Any = None
    id_length: Any = None
    secret_length: Any = None
    encoding: Any = None

    def options(self) -> dict[str, Any]:
        """Return only the options that were actually supplied."""
        return {
            key: value
            for key, value in self.model_dump().items()
            if value is not None
        }


class GenerateCredentialsResponse(BaseModel):
    """Response after generating credentials."""

    credentials: CredentialPair


class GenerateCredentialsUseCase(
    BaseUseCase[GenerateCredentialsRequest, GenerateCredentialsResponse]
):
    """Use case for generating a client id / client secret pair."""

    def __init__(self, credential_service: CredentialService) -> None:
        """Initialize use case.

        Args:
            credential_service: Credential domain service
        """
        self.credential_service = credential_service

    def execute(
        self, request: GenerateCredentialsRequest
    ) -> GenerateCredentialsResponse:
        """Execute generate credentials use case.

        Args:
            request: Generate credentials request

        Returns:
            Response with the generated credential pair

        Raises:
            ValidationError: If any option is invalid
        """
        options = request.options()

        with logfire.span("generate_credentials", **_describe(options)):
            try:
                credentials = self.credential_service.generate(options)
            except ValidationError as e:
                logfire.warn(
                    "Invalid generation options",
                    field=e.field,
                    error=e.message,
                )
                raise

            # Only shapes are logged, never the generated values
            logfire.info(
                "Credentials generated",
                client_id_length=len(credentials.client_id),
                client_secret_length=len(credentials.client_secret),
            )
            return GenerateCredentialsResponse(credentials=credentials)


def _describe(options: dict[str, Any]) -> dict[str, str]:
    return {key: str(value) for key, value in options.items()}
