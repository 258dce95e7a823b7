"""Shared pytest fixtures for hadoop_client tests."""

from __future__ import annotations

import os
import sys
import uuid
import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("HADOOP_CLIENT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HADOOP_CLIENT_USER", "tester")


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: None) -> Iterator[None]:
    from hadoop_client.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def make_artifact(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Callable[..., str]]:
    """Factory putting a fake Hadoop artifact on ``sys.path``.

    Returns the dotted name of the ``FileSystem`` class it provides.  By
    default the artifact is a zip archive; ``archive=False`` lays it out as
    a directory instead.
    """
    packages: list[str] = []

    def _make(artifact_name: str, *, archive: bool = True) -> str:
        package = f"fakehadoop_{uuid.uuid4().hex[:8]}"
        location = tmp_path / artifact_name
        if archive:
            with zipfile.ZipFile(location, "w") as zf:
                zf.writestr(f"{package}/__init__.py", "")
                zf.writestr(f"{package}/fs.py", "class FileSystem:\n    pass\n")
        else:
            pkg_dir = location / package
            pkg_dir.mkdir(parents=True)
            (pkg_dir / "__init__.py").write_text("")
            (pkg_dir / "fs.py").write_text("class FileSystem:\n    pass\n")
        monkeypatch.syspath_prepend(str(location))
        packages.append(package)
        return f"{package}.fs.FileSystem"

    yield _make

    for name in list(sys.modules):
        if name.split(".")[0] in packages:
            del sys.modules[name]
