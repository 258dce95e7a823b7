"""Shared utilities."""

from .singletons import register_singleton, registered_singletons, reset_all_singletons

__all__ = [
    "register_singleton",
    "registered_singletons",
    "reset_all_singletons",
]
