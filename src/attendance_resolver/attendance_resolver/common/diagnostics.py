from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable data-quality finding raised while resolving a day."""

    code: str
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "context": dict(self.context)}


DiagnosticSink = Callable[[Diagnostic], None]

INVALID_SATURDAY_POLICY = "INVALID_SATURDAY_POLICY"
HALF_DAY_WITHOUT_REASON = "HALF_DAY_WITHOUT_REASON"
UNKNOWN_PERSISTED_STATUS = "UNKNOWN_PERSISTED_STATUS"
UNMATCHED_LOG_FALLBACK = "UNMATCHED_LOG_FALLBACK"


def logging_sink(diagnostic: Diagnostic) -> None:
    """Default sink: hand the finding to the operator log."""
    logger.warning("[%s] %s %s", diagnostic.code, diagnostic.message, dict(diagnostic.context))


def null_sink(diagnostic: Diagnostic) -> None:
    return None


class CollectingSink:
    """Keeps diagnostics in memory (per request / in tests)."""

    def __init__(self, forward: DiagnosticSink | None = None):
        self.items: list[Diagnostic] = []
        self._forward = forward

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if self._forward:
            self._forward(diagnostic)

    @property
    def codes(self) -> list[str]:
        return [d.code for d in self.items]
