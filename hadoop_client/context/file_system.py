"""Context shared by every filesystem client in the process."""

from __future__ import annotations

from .base import ProcessContext


class FileSystemContext(ProcessContext):
    name = "file-system-context"
    service = "file-system-master"

    def _init_state(self) -> None:
        super()._init_state()
        self._configured_by: str | None = None

    def configure(self, hostname: str, port: int, *, origin: str | None = None) -> None:
        """Point the context at another master; cached clients are dropped."""
        self.close()
        self.master_address = f"{hostname}:{port}"
        self._configured_by = origin

    @property
    def configured_by(self) -> str | None:
        """URI that last configured the master address, if any."""
        return self._configured_by
