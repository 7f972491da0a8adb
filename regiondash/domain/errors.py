"""Exceptions raised by ManagerApi implementations.

Each error carries a coarse `category` so the orchestrator can record why a
fetch failed without depending on the transport library.
"""

from typing import Optional


class ManagerApiError(Exception):
    """Base exception for failures of a manager API capability."""

    category = "unknown"

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class ManagerApiConnectionError(ManagerApiError):
    """The request could not reach the API."""

    category = "network"


class ManagerApiTimeoutError(ManagerApiError):
    """The API did not answer within the configured timeout."""

    category = "timeout"


class ManagerApiStatusError(ManagerApiError):
    """The API answered with a non-2xx status."""

    category = "http_status"

    def __init__(self, message: str, status_code: int, endpoint: Optional[str] = None):
        super().__init__(message, endpoint=endpoint)
        self.status_code = status_code


class ManagerApiDecodeError(ManagerApiError):
    """The API answered with a payload that could not be parsed."""

    category = "decode"
