"""Domain-specific exceptions"""

from typing import Any, Optional


class TemboError(Exception):
    """Base exception for every failure surfaced by the client"""

    kind = "error"


class ValidationError(TemboError):
    """Request failed local pre-flight checks and was never sent"""

    kind = "validation"

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class TransportError(TemboError):
    """Connection failure, timeout, or non-2xx reply without an error envelope"""

    kind = "transport"

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ApiError(TemboError):
    """Gateway returned a non-2xx status with a decodable error envelope"""

    kind = "api"

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        message: str = "",
        details: Any = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.message = message
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.reason:
            return f"TemboPlus API Error [{self.status_code}]: {self.reason}"
        if self.message:
            return f"TemboPlus API Error [{self.status_code}]: {self.message}"
        return f"TemboPlus API Error [{self.status_code}]"


class BusinessError(TemboError):
    """HTTP call succeeded but the payload reports a rejected or failed payment"""

    kind = "business"

    def __init__(self, status_code: str, response: Any = None, message: str = "Request failed"):
        self.status_code = status_code
        self.response = response
        self.message = message
        super().__init__(f"TemboPlus API Error [{status_code}]: {message}")


class DecodeError(TemboError):
    """Response or webhook body does not match the expected shape"""

    kind = "decode"

    def __init__(self, message: str, body: Optional[str] = None):
        self.message = message
        self.body = body
        super().__init__(message)
