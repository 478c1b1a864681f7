"""
Exceptions raised by the mock GraphQL engine.

Validation and not-found errors are data conditions that handlers turn into
``userErrors``. Empty queries and id generation failures are hard failures.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

Failure = Union[str, Mapping[str, Any]]


class MockGraphqlError(Exception):
    """Base class for every mock engine error."""


class MockGraphqlValidationError(MockGraphqlError):
    def __init__(self, failures: Iterable[Failure], message: str = "Validation failed"):
        super().__init__(message)
        self.failures: list[Failure] = list(failures)


class MockNotFoundError(MockGraphqlValidationError):
    def __init__(self, field: str = "id", message: str = "Non existing"):
        super().__init__([{"field": field, "message": message}], message)


class EmptyQueryError(MockGraphqlError):
    def __init__(self, message: str = "Empty query"):
        super().__init__(message)


class EmptyPrefixError(MockGraphqlError):
    def __init__(self, message: str = "Unable to generate random ID: prefix is empty"):
        super().__init__(message)


class GenerationExhaustedError(MockGraphqlError):
    def __init__(self, message: str = "Unable to generate a random ID: reached max attempts."):
        super().__init__(message)
