"""
Relay error hierarchy.

Every failure a handler can hit is turned into one of these and rendered as the
uniform envelope ``{"success": false, "error": ..., "details": ...}``.
"""
from typing import Any, Dict, Optional


class RelayError(Exception):
    """Base class for errors rendered as an error envelope."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None):
        self.error = error
        self.details = details
        super().__init__(error)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(RelayError):
    """A required field is missing or out of bounds."""

    status_code = 400


class UpstreamError(RelayError):
    """The payment provider call failed. No retry is attempted."""

    status_code = 500


class VerificationMismatch(RelayError):
    """The supplied payment signature does not match the computed one."""

    status_code = 400
