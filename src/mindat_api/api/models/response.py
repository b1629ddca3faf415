from typing import Any, Optional
from http.client import responses
from pydantic import BaseModel, ConfigDict
from mindat_api.exceptions import ErrorKind, MindatAPIException
from mindat_api.utils import try_int


class APIResponse(BaseModel):
    """All outcomes of a MindatClient request inherit from this."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    url: Optional[str] = None
    response: Optional[Any] = None

    @property
    def status_code(self) -> Optional[int]:
        """
        Helper property for retrieving the status code of the underlying HTTP response

        Returns:
            Optional[int]: The status code associated with the response (if available)
        """
        status_code = getattr(self.response, "status_code", None)
        return status_code if isinstance(status_code, int) else try_int(status_code)

    @property
    def status(self) -> Optional[str]:
        """
        Helper property for retrieving a human-readable status description

        Returns:
            Optional[str]: The reason phrase associated with the status code (if available)
        """
        return responses.get(self.status_code) if self.status_code else None


class ErrorResponse(APIResponse):
    """
    Returned when a request fails at any stage. Nothing is raised to the caller: the failure
    category, the classified exception and its message are handed back instead.

    An ErrorResponse is always falsy, so callers can branch with `if not result:`.
    """

    error: ErrorKind
    exception: Optional[MindatAPIException] = None
    message: Optional[str] = None
    data: None = None

    @property
    def status_code(self) -> Optional[int]:
        """The HTTP status when a response was received, else the status recorded on the exception"""
        status_code = super().status_code
        if status_code is None and self.exception is not None:
            return self.exception.status_code
        return status_code

    def __repr__(self) -> str:
        return f"<ErrorResponse(error={self.error.value}, message={self.message!r})>"

    def __bool__(self) -> bool:
        return False


class ProcessedResponse(APIResponse):
    """
    Returned when the response was received and decoded into the requested type. `data` holds the
    typed value: a record, a pagination envelope, or plain JSON for the untyped endpoints.
    """

    data: Any = None
    error: None = None

    def __repr__(self) -> str:
        return f"<ProcessedResponse(status_code={self.status_code}, data={type(self.data).__name__})>"

    def __bool__(self) -> bool:
        return True


__all__ = ["APIResponse", "ErrorResponse", "ProcessedResponse"]
