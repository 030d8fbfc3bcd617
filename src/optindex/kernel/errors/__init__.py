"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── UnknownStrategyError
    │   └── ValueAbsentError
    └── ApplicationError     (application.py)
"""

from optindex.kernel.errors.application import ApplicationError
from optindex.kernel.errors.base import BaseError
from optindex.kernel.errors.domain import (
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
