"""Credential use cases."""

from .generate_credentials import (
    GenerateCredentialsRequest,
    GenerateCredentialsResponse,
    GenerateCredentialsUseCase,
)

__all__ = [
    "GenerateCredentialsUseCase",
    "GenerateCredentialsRequest",
    "GenerateCredentialsResponse",
]
