"""Process-wide client contexts with an explicit init/reset lifecycle."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from ..config.settings import cfg
from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)

_client_ids = itertools.count(1)

C = TypeVar("C", bound="ProcessContext")


@dataclass
class MasterClient:
    """Handle to a master service, cached and handed out by a context."""

    address: str
    user: str
    service: str
    id: int = field(default_factory=lambda: next(_client_ids))
    closed: bool = False

    def close(self) -> None:
        self.closed = True


class ProcessContext:
    """Base for process-wide contexts.

    Each subclass owns one instance, built on first :meth:`get` and returned
    to its construction state by :meth:`reset`.  Subclasses register with the
    singleton registry so ``reset_all_singletons()`` discards the instance.
    """

    name: ClassVar[str] = "process-context"
    service: ClassVar[str] = ""

    _instance: ClassVar[ProcessContext | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None
        register_singleton(cls.name, cls.discard)

    def __init__(self) -> None:
        self._clients: list[MasterClient] = []
        self._init_state()

    @classmethod
    def get(cls: type[C]) -> C:
        if cls._instance is None:
            cls._instance = cls()
            logger.debug("Created %s", cls.name)
        return cls._instance  # type: ignore[return-value]

    @classmethod
    def discard(cls) -> None:
        """Drop the instance; the next :meth:`get` builds a fresh one."""
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None

    # -- lifecycle ---------------------------------------------------------

    def reset(self) -> None:
        """Close cached clients and re-read configuration."""
        self.close()
        self._init_state()
        logger.debug("Reset %s", self.name)

    def close(self) -> None:
        for client in self._clients:
            client.close()
        self._clients.clear()

    def _init_state(self) -> None:
        self.master_address: str = cfg.master_address
        self.user: str = cfg.user

    # -- clients -----------------------------------------------------------

    def acquire_master_client(self) -> MasterClient:
        """Return a cached client for the configured master, creating one if needed."""
        for client in self._clients:
            if not client.closed and client.address == self.master_address:
                return client
        client = MasterClient(address=self.master_address, user=self.user, service=self.service)
        self._clients.append(client)
        return client

    @property
    def clients(self) -> tuple[MasterClient, ...]:
        return tuple(self._clients)
