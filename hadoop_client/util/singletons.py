"""Named reset callbacks for the client's process-wide state.

Settings, contexts and the filesystem guard register themselves here when
imported.  Test fixtures call :func:`reset_all_singletons` so each test
starts from freshly built state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

_registry: dict[str, Callable[[], None]] = {}


def register_singleton(name: str, reset_fn: Callable[[], None]) -> None:
    """Register *reset_fn* under *name*, replacing any earlier callback for it."""
    _registry[name] = reset_fn


def registered_singletons() -> tuple[str, ...]:
    return tuple(_registry)


def reset_all_singletons() -> None:
    """Run every callback in registration order; the first failure propagates."""
    for name, reset_fn in list(_registry.items()):
        logger.debug("Resetting %s", name)
        reset_fn()
