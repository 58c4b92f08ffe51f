"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All VendorService methods return ServiceResult.
Domain errors are converted here, never raised to the CLI.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vendorctl.domain.errors import VendorError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: VendorError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"link"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: VendorError, **detail: Any) -> ServiceResult:
        """Build a failed result from a domain error."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))
