"""Non-fatal content and hiring diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Literal

import structlog

DiagnosticKind = Literal[
    "missing_identifier",
    "legacy_field_used",
    "unresolved_reference",
    "invalid_priority",
]


@dataclass(slots=True)
class Diagnostic:
    """A recovered problem found while loading content or generating hires."""

    kind: DiagnosticKind
    event: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)


class DiagnosticLog:
    """Logs diagnostics through structlog and keeps them for later inspection.

    Nothing here raises: callers skip the offending entry and continue.
    """

    def __init__(self, *, logger_name: str = __name__) -> None:
        self._entries: list[Diagnostic] = []
        self._logger = structlog.get_logger(logger_name)

    def warn(self, kind: DiagnosticKind, event: str, message: str, **context: Any) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, event=event, message=message, context=context)
        self._entries.append(diagnostic)
        self._logger.warning(event, kind=kind, message=message, **context)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [entry for entry in self._entries if entry.kind == kind]

    @property
    def entries(self) -> list[Diagnostic]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Diagnostic", "DiagnosticKind", "DiagnosticLog"]
