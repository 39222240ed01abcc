"""Normalized outcome of a download request."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RequestResult:
    """Success or failure of a single API call.

    Exactly one of ``data`` (on success) or ``message`` (on failure) is
    meaningful. Build instances with ``ok()`` / ``fail()``.

    Attributes:
        success: Whether the API accepted the request
        data: Parsed response body on success
        message: Best-available diagnostic on failure
        status_code: HTTP status, when a response was received
    """
    success: bool
    data: Any = None
    message: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, data: Any, status_code: Optional[int] = 200) -> 'RequestResult':
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def fail(cls, message: str, status_code: Optional[int] = None) -> 'RequestResult':
        return cls(success=False, message=message, status_code=status_code)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict:
        """Convert to the plain ``{success, data}`` / ``{success, message}`` shape.

        Failures also carry ``status_code`` when a response was received.
        """
        if self.success:
            return {'success': True, 'data': self.data}
        result = {'success': False, 'message': self.message}
        if self.status_code is not None:
            result['status_code'] = self.status_code
        return result
