"""ServiceResult and ServiceError: what the services hand back to the CLI.

INVARIANT: All service-layer methods return ServiceResult, and a result
carries an error exactly when it is not ``ok``.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, Field, model_validator

ErrorCode: TypeAlias = Literal["UNKNOWN_MODULE", "INVALID_OPTION"]

ERROR_HINTS: dict[str, str] = {
    "UNKNOWN_MODULE": "Run 'utilkit api' to list the helper modules.",
    "INVALID_OPTION": (
        "Locales are BCP 47 tags such as en-US; time zones are IANA names such as Europe/Paris."
    ),
}


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Every code names a bad argument or option, so the CLI exits with
    Click's usage-error status for all of them.
    """

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def hint(self) -> str:
        """A one-line suggestion for fixing the invocation."""
        return ERROR_HINTS[self.code]


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"list_exports"`` or ``"format_date"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as an unparseable date.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata such as the export count.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_status(self) -> ServiceResult:
        if self.ok and self.error is not None:
            msg = f"{self.op}: a successful result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.error is None:
            msg = f"{self.op}: a failed result needs an error"
            raise ValueError(msg)
        return self
