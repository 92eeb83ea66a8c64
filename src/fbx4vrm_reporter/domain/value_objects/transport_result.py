from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransportFailure(str, Enum):
    CONNECTION = "connection"
    HTTP = "http"


@dataclass(frozen=True, slots=True)
class TransportResult:
    """Raw outcome of a single HTTP exchange, before any JSON parsing."""

    status_code: int
    body: str | None = None
    error: str | None = None
    failure: TransportFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None
