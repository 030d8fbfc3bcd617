"""Domain errors — contract violations raised by kernel types and search."""

from __future__ import annotations

from typing import Any

from optindex.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownStrategyError(ValidationError):
    """No search strategy is registered under the requested name."""

    default_code = "unknown_strategy"

    def __init__(self, name: str, available: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Unknown search strategy '{name}'",
            errors=[{"field": "strategy", "value": name, "allowed": available}],
            **kwargs,
        )
        self.name = name
        self.available = available


class ValueAbsentError(DomainError, ValueError):
    """A value was demanded from an empty ``Option``.

    Only raised by the unsafe accessors (``unwrap`` / ``expect``); the safe
    ones (``unwrap_or``, ``map``, pattern matching) never raise it.
    """

    default_code = "value_absent"

    def __init__(self, message: str = "Called unwrap() on Nothing", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "DomainError",
    "UnknownStrategyError",
    "ValidationError",
    "ValueAbsentError",
]
