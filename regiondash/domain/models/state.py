"""Observable request state for a logical fetch (manager list or manager data)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestState:
    """Snapshot of one fetch's state machine.

    `message` is the fixed user-facing text of a failure. `error_category`
    ('network', 'timeout', 'http_status', 'decode', 'unknown') is kept for
    diagnostics and is not shown to users.
    """
    status: RequestStatus = RequestStatus.IDLE
    message: Optional[str] = None
    error_category: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is RequestStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self.message if self.status is RequestStatus.FAILED else None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls(RequestStatus.IDLE)

    @classmethod
    def loading(cls) -> "RequestState":
        return cls(RequestStatus.LOADING)

    @classmethod
    def ready(cls) -> "RequestState":
        return cls(RequestStatus.READY)

    @classmethod
    def failed(cls, message: str, error_category: Optional[str] = None) -> "RequestState":
        return cls(RequestStatus.FAILED, message=message, error_category=error_category)
