"""Tests for generate credentials use case."""

from unittest.mock import MagicMock, patch

import pytest

from credgen.application.usecase.credentials import (
    GenerateCredentialsRequest,
    GenerateCredentialsUseCase,
)
from credgen.domain.error import ValidationError
from credgen.domain.service import CredentialService

LOGFIRE = "credgen.application.usecase.credentials.generate_credentials.logfire"


class TestGenerateCredentialsUseCase:
    """Tests for GenerateCredentialsUseCase."""

    def test_generates_credentials(self):
        """Supplied options are forwarded to the credential service."""
        # Arrange
        use_case = GenerateCredentialsUseCase(CredentialService())
        request = GenerateCredentialsRequest(
            id_prefix="prod", id_length=32, secret_length=64, encoding="hex"
        )

        # Act
        response = use_case.execute(request)

        # Assert
        assert response.credentials.client_id.startswith("prod_")
        assert len(response.credentials.client_id) == len("prod_") + 32
        assert len(response.credentials.client_secret) == 64

    def test_omitted_options_use_defaults(self):
        """Fields left as None are not passed on, so defaults apply."""
        use_case = GenerateCredentialsUseCase(CredentialService())

        response = use_case.execute(GenerateCredentialsRequest())

        assert response.credentials.client_id.startswith("oauth_")
        assert len(response.credentials.client_secret) == 48

    def test_request_options_skip_unset_fields(self):
        """Only supplied options are reported."""
        request = GenerateCredentialsRequest(id_prefix="x", id_length=0)

        assert request.options() == {"id_prefix": "x", "id_length": 0}

    def test_validation_error_propagates(self):
        """Invalid options surface as a domain ValidationError."""
        use_case = GenerateCredentialsUseCase(CredentialService())

        with pytest.raises(ValidationError, match="id_length must be a positive integer"):
            use_case.execute(GenerateCredentialsRequest(id_length=0))

    def test_validation_error_is_logged(self):
        """Rejected options are logged with the failing field."""
        use_case = GenerateCredentialsUseCase(CredentialService())

        with patch(LOGFIRE) as logfire:
            with pytest.raises(ValidationError):
                use_case.execute(GenerateCredentialsRequest(encoding="bogus"))

        logfire.warn.assert_called_once()
        assert logfire.warn.call_args.kwargs["field"] == "encoding"

    def test_generated_values_are_never_logged(self):
        """Spans and log records carry option values and sizes only."""
        use_case = GenerateCredentialsUseCase(CredentialService())

        with patch(LOGFIRE) as logfire:
            response = use_case.execute(GenerateCredentialsRequest(id_prefix="svc"))

        logfire.span.assert_called_once_with("generate_credentials", id_prefix="svc")
        logged = repr(logfire.mock_calls)
        assert response.credentials.client_secret not in logged
        assert response.credentials.client_id not in logged

    def test_uses_injected_service(self):
        """The use case delegates to the service it was built with."""
        service = MagicMock(spec=CredentialService)
        service.generate.return_value = CredentialService().generate()
        use_case = GenerateCredentialsUseCase(service)

        use_case.execute(GenerateCredentialsRequest(id_length=8))

        service.generate.assert_called_once_with({"id_length": 8})
