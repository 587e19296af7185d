"""In-memory cache of compiled templates keyed by template name."""

from __future__ import annotations

import threading

from ..core.models import CompiledTemplate


class TemplateCache:
    """Unbounded name -> CompiledTemplate mapping shared by concurrent renders.

    Each instance owns its lock, so separate renderers never contend.
    Only mutations take the lock; a dict read is atomic and always sees
    either the previous entry or the new one.
    """

    def __init__(self) -> None:
        self._templates: dict[str, CompiledTemplate] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> CompiledTemplate | None:
        return self._templates.get(name)

    def put(self, name: str, template: CompiledTemplate) -> None:
        with self._lock:
            self._templates[name] = template

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
