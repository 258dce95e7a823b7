"""Hadoop-compatible filesystem entry point."""

from __future__ import annotations

import logging
from typing import ClassVar
from urllib.parse import urlsplit

from .config.settings import cfg
from .context import FileSystemContext
from .util.singletons import register_singleton

logger = logging.getLogger(__name__)


class AbstractFileSystem:
    """Base of the Hadoop ``FileSystem`` adapters.

    The first :meth:`initialize` in a process points the shared
    :class:`FileSystemContext` at the master named by the URI.  Later
    instances reuse that configuration, whatever their URI, until
    :meth:`reset_for_testing` clears the guard.
    """

    SCHEME: ClassVar[str] = "hcfs"

    _initialized: ClassVar[bool] = False

    def __init__(self) -> None:
        self.uri: str | None = None
        self.context: FileSystemContext | None = None

    def initialize(self, uri: str) -> None:
        parts = urlsplit(uri)
        if parts.scheme != self.SCHEME:
            raise ValueError(f"Unsupported scheme in {uri!r}, expected {self.SCHEME}://")

        self.uri = uri
        self.context = FileSystemContext.get()

        if AbstractFileSystem._initialized:
            logger.debug("Contexts already initialized; %s reuses %s", uri, self.context.master_address)
            return

        if parts.hostname:
            self.context.configure(parts.hostname, parts.port or cfg.master_port, origin=uri)
        AbstractFileSystem._initialized = True
        logger.debug("Initialized contexts from %s", uri)

    @classmethod
    def is_initialized(cls) -> bool:
        return AbstractFileSystem._initialized

    @classmethod
    def reset_for_testing(cls) -> None:
        """Return the guard to not-initialized so the next ``initialize`` reconfigures."""
        AbstractFileSystem._initialized = False


class FileSystem(AbstractFileSystem):
    """Filesystem for ``hcfs://`` URIs."""


register_singleton("file-system-initialized", AbstractFileSystem.reset_for_testing)
