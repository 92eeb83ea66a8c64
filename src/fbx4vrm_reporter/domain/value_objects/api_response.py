from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class ApiResponse(Generic[_T]):
    """
    Outcome of one request against the FBX4VRM server.

    Build instances through `success()` / `failure()`: a successful response
    always carries data, a failed one always carries an error message.
    `status_code` is 0 when the server was never reached.
    """

    ok: bool
    data: _T | None = None
    error: str | None = None
    status_code: int = 0
    raw_body: str | None = None

    @classmethod
    def success(cls, data: _T, status_code: int, raw_body: str | None) -> ApiResponse[_T]:
        if data is None:
            raise ValueError("A successful response requires data")
        return cls(ok=True, data=data, status_code=status_code, raw_body=raw_body)

    @classmethod
    def failure(cls, error: str, status_code: int = 0, raw_body: str | None = None) -> ApiResponse[_T]:
        if not error:
            raise ValueError("A failed response requires an error message")
        return cls(ok=False, error=error, status_code=status_code, raw_body=raw_body)
