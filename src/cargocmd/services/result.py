"""ServiceResult and ServiceError — the contract between services and the CLI.

Resolution and listing return ServiceResult; the CLI context decides how
to render it and which exit code to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cargocmd.domain.errors import CargoCmdError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: CargoCmdError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Uniform return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"resolve"``, ``"list_commands"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: CargoCmdError, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))
