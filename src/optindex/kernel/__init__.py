"""Kernel – framework-agnostic building blocks."""

from optindex.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownStrategyError,
    ValidationError,
    ValueAbsentError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnknownStrategyError",
    "ValidationError",
    "ValueAbsentError",
]
