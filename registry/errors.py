from __future__ import annotations


class RegistryError(Exception):
    """Base error for the user registry.

    Carries a ``kind`` tag for the HTTP boundary and an optional wrapped cause.
    """

    kind = "registry_error"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class MalformedInputError(RegistryError):
    kind = "malformed_input"


class ValidationError(RegistryError):
    kind = "validation"


class ConflictError(RegistryError):
    kind = "conflict"
