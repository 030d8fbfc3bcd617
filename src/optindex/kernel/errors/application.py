"""Application-layer errors — cross-cutting concerns outside the kernel."""

from __future__ import annotations

from optindex.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
