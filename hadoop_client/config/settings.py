"""Client settings -- read from ``HADOOP_CLIENT_*`` environment variables."""

from __future__ import annotations

import getpass
import os
from typing import ClassVar

from ..util.singletons import register_singleton


class Settings:
    """Runtime configuration sourced from the environment."""

    PREFIX: ClassVar[str] = "HADOOP_CLIENT_"
    DEFAULT_MASTER_PORT: ClassVar[int] = 19998
    DEFAULT_HADOOP_CLASS: ClassVar[str] = "hadoop.fs.FileSystem"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment.

        Nothing is assigned until every value has parsed, so a bad value
        leaves the current settings in place.
        """
        e = self._read

        master_hostname = e("MASTER_HOSTNAME") or "localhost"
        master_port = int(e("MASTER_PORT") or self.DEFAULT_MASTER_PORT)
        hadoop_class = e("HADOOP_CLASS") or self.DEFAULT_HADOOP_CLASS
        user = e("USER") or self._login_name()

        self.master_hostname: str = master_hostname
        self.master_port: int = master_port
        self.hadoop_class: str = hadoop_class
        self.user: str = user

    @property
    def master_address(self) -> str:
        return f"{self.master_hostname}:{self.master_port}"

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return os.getenv(self.PREFIX + key, "").strip()

    @staticmethod
    def _login_name() -> str:
        try:
            return getpass.getuser()
        except (KeyError, OSError):
            return "anonymous"


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    cfg.reload()


register_singleton("settings", _reset_cfg)
