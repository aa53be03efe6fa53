"""Service layer — CLI-facing operations returning ServiceResult.

Services may import from the core and config layers.
They must never import from commands or output.
"""
