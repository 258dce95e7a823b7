"""Context for lineage master clients."""

from __future__ import annotations

from .base import ProcessContext


class LineageContext(ProcessContext):
    name = "lineage-context"
    service = "lineage-master"
