"""Process-wide client contexts."""

from .base import MasterClient, ProcessContext
from .file_system import FileSystemContext
from .lineage import LineageContext

__all__ = [
    "FileSystemContext",
    "LineageContext",
    "MasterClient",
    "ProcessContext",
]
