"""ApiService — list the exported helper surface of the core modules.

Each core module declares its public names in ``__all__``; this service
imports the modules and describes every exported name by kind, signature,
and the first line of its docstring.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any

from utilkit.core import HELPER_MODULES
from utilkit.services.base import BaseService
from utilkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _kind(obj: Any) -> str:
    if inspect.iscoroutinefunction(obj):
        return "async function"
    if inspect.isfunction(obj):
        return "function"
    if inspect.isclass(obj):
        return "class"
    return "constant"


def _signature(obj: Any) -> str:
    if not (inspect.isfunction(obj) or inspect.isclass(obj)):
        return ""
    try:
        return str(inspect.signature(obj))
    except (TypeError, ValueError):
        return ""


def _summary(obj: Any) -> str:
    if not (inspect.isfunction(obj) or inspect.isclass(obj)):
        return ""
    doc = inspect.getdoc(obj) or ""
    return doc.splitlines()[0] if doc else ""


def describe_module(name: str) -> list[dict[str, str]]:
    """Describe every name in ``utilkit.core.<name>.__all__``, sorted by name."""
    module = importlib.import_module(f"utilkit.core.{name}")
    entries: list[dict[str, str]] = []
    for export in sorted(getattr(module, "__all__", [])):
        obj = getattr(module, export)
        entries.append(
            {
                "name": export,
                "kind": _kind(obj),
                "signature": _signature(obj),
                "summary": _summary(obj),
            }
        )
    return entries


class ApiService(BaseService):
    """Introspect the helper library for the ``api`` command."""

    def list_exports(self, module: str | None = None) -> ServiceResult:
        """List exports of one core module, or of all of them."""
        op = "list_exports"
        if module is not None and module not in HELPER_MODULES:
            return self._error(
                op,
                "UNKNOWN_MODULE",
                f"Unknown module: {module}",
                {"available": list(HELPER_MODULES)},
            )

        names = [module] if module is not None else list(HELPER_MODULES)
        modules: list[dict[str, Any]] = []
        for name in names:
            exports = describe_module(name)
            logger.debug("Described %d exports in %s", len(exports), name)
            modules.append({"module": name, "exports": exports})

        total = sum(len(m["exports"]) for m in modules)
        return self._ok(op, {"modules": modules}, meta={"total": total})
