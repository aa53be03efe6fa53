"""Core helper library: pure functions grouped by the kind of value they handle.

This layer depends only on stdlib, pydantic, and babel.
It must never import from services, output, commands, or config.
"""

HELPER_MODULES: tuple[str, ...] = (
    "arrays",
    "dates",
    "functions",
    "numbers",
    "objects",
    "promises",
    "strings",
    "types",
    "typeinfo",
    "urls",
)
