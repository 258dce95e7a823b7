"""Root conftest -- loads the client's own pytest plugin and ``pytester``."""

from __future__ import annotations

pytest_plugins = ["pytester", "hadoop_client.testing.plugin"]
