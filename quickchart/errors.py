from __future__ import annotations

from typing import Optional


class QuickChartError(Exception):
    """Base class for everything the client raises."""


class TransportError(QuickChartError):
    """Connection, DNS or timeout failure before a response arrived."""


class HttpStatusError(QuickChartError):
    def __init__(self, status_code: int, url: str, body: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"HTTP error: {status_code} for url {url}")


class ResponseParseError(QuickChartError):
    """Response body was expected to be JSON but is not."""


class MissingFieldError(QuickChartError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing field in response: {field}")


class UrlBuildError(QuickChartError):
    pass


class FileWriteError(QuickChartError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
