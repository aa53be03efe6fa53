"""BaseService — shared foundation for utilkit services.

Every service receives the frozen :class:`UtilkitSettings` at construction
time and reports through :class:`ServiceResult`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utilkit.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ApiService(BaseService):
            def list_exports(self) -> ServiceResult:
                return self._ok("list_exports", {"modules": [...]})
    """

    def __init__(self, settings: UtilkitSettings) -> None:
        self._settings = settings

    @staticmethod
    def _ok(
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @staticmethod
    def _error(
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
