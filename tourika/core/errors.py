from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.details = details


class NotFoundError(APIError):
    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_404_NOT_FOUND, message, details)


class ValidationError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, details)


class InternalError(APIError):
    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message, details)


class ItineraryGenerationError(Exception):
    """The language model could not produce an itinerary."""


class MalformedItineraryError(ItineraryGenerationError):
    """The language model answered, but not with a usable itinerary payload."""


def error_content(message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    content: Dict[str, Any] = {"message": message}
    if details:
        content["details"] = details
    return content
