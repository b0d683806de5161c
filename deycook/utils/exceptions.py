"""Custom exception classes."""

from typing import Any, Dict, List, Optional

PERMISSION_HINT = (
    "403 Forbidden from Gemini. Ensure the Generative Language API is enabled for the "
    "same project tied to your API key in Google AI Studio, or create a new key and "
    "enable the API for that project."
)


class DeyCookException(Exception):
    """Base exception for DeyCook application."""

    status_code: int = 500
    error_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.error_message)
        self.message = message or self.error_message

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body returned to the client."""
        return {"error": self.message}


class InvalidInput(DeyCookException):
    """Raised when the client-supplied ingredient list normalizes to nothing."""

    status_code = 400
    error_message = "ingredients is required as array or comma/newline string"

    def __init__(self, message: Optional[str] = None, received: Any = None) -> None:
        super().__init__(message)
        self.received = received

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["received"] = self.received
        return payload


class ValidationError(DeyCookException):
    """Raised when a request body fails validation."""

    status_code = 400
    error_message = "Validation error"


class ConfigurationError(DeyCookException):
    """Raised when a required setting is missing."""

    status_code = 500
    error_message = "Missing configuration"


class UpstreamError(DeyCookException):
    """Raised when the generation service call fails."""

    error_message = "Failed to generate recipe"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code or 500
        self.details = details

    @property
    def help_links(self) -> List[Any]:
        """Links from a ``google.rpc.Help`` entry in the upstream details."""
        if not isinstance(self.details, list):
            return []
        for detail in self.details:
            if isinstance(detail, dict) and "Help" in str(detail.get("@type", "")):
                return list(detail.get("links") or [])
        return []

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.details:
            payload["details"] = self.details
            links = self.help_links
            if links:
                payload["help"] = links
        if self.status_code == 403:
            payload["hint"] = PERMISSION_HINT
        return payload


class InvalidModelResponse(UpstreamError):
    """Raised when model output cannot be parsed as JSON."""

    error_message = "Invalid model response"

    def __init__(self, raw: str, message: Optional[str] = None) -> None:
        super().__init__(message, status_code=502)
        self.raw = raw

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class WebhookError(DeyCookException):
    """Raised when the email relay webhook fails."""

    error_message = "Webhook failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code or 500
        self.details = details

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.details is not None:
            payload["details"] = self.details
        return payload
