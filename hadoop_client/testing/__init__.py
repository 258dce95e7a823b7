"""Helpers for the client test suites.

``reset_client()`` belongs in test teardown; the version helpers let tests
branch on the Hadoop line available on the import path.
"""

from .classloading import ClassLoader, MockClassLoader, get_class_loader
from .errors import ClassNotFoundError, SetupError, VersionResolutionError
from .reset import reset_client
from .version import VersionProbe, get_hadoop_version, is_hadoop_1x, is_hadoop_2x

__all__ = [
    "ClassLoader",
    "ClassNotFoundError",
    "MockClassLoader",
    "SetupError",
    "VersionProbe",
    "VersionResolutionError",
    "get_class_loader",
    "get_hadoop_version",
    "is_hadoop_1x",
    "is_hadoop_2x",
    "reset_client",
]
