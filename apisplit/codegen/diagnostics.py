"""Collection of non-fatal conditions found while translating a document."""

import dataclasses
import enum
import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)

__all__ = ['Severity', 'Diagnostic', 'DiagnosticCollector']


class Severity(str, enum.Enum):
    NOTE = 'note'
    WARNING = 'warning'


_LOG_LEVELS = {
    Severity.NOTE: logging.DEBUG,
    Severity.WARNING: logging.WARNING,
}


@dataclasses.dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    context: str | None = None

    def __str__(self) -> str:
        if self.context:
            return f'{self.severity.value}: {self.message} ({self.context})'
        return f'{self.severity.value}: {self.message}'


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are emitted.

    Every diagnostic is also logged, at debug level for notes and at
    warning level for warnings.

    Example:
        >>> diagnostics = DiagnosticCollector()
        >>> diagnostics.note('Dropped typealias', context='Components.Schemas.Tags')
        >>> [str(d) for d in diagnostics]
        ['note: Dropped typealias (Components.Schemas.Tags)']
    """

    def __init__(self):
        self._diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        logger.log(_LOG_LEVELS[diagnostic.severity], str(diagnostic))
        self._diagnostics.append(diagnostic)

    def note(self, message: str, context: str | None = None) -> None:
        self.emit(Diagnostic(Severity.NOTE, message, context))

    def warning(self, message: str, context: str | None = None) -> None:
        self.emit(Diagnostic(Severity.WARNING, message, context))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics.copy()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics.copy())

    def __len__(self) -> int:
        return len(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()
