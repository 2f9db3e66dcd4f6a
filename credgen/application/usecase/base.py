"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases are synchronous: generation is CPU-only work with no I/O.
    """

    @abstractmethod
    def execute(self, request: RequestT) -> ResponseT:
        pass
