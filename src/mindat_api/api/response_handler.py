from functools import lru_cache
from typing import Any, Optional
import logging
import requests
from pydantic import TypeAdapter, ValidationError
from mindat_api.exceptions import (MindatAPIException, AuthenticationRequiredException, NotFoundException,
                                   RateLimitExceededException, ResponseDecodeException, UpstreamAPIException)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _type_adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class ResponseHandler:
    """
    Turns a received response into either a typed value or a classified exception.

    Status codes are checked before the body is read:
        - 401 -> AuthenticationRequiredException
        - 404 -> NotFoundException carrying the body text
        - 429 -> RateLimitExceededException
        - any other non-2xx -> UpstreamAPIException carrying the status and body text
    A 2xx body that is not JSON, or that does not match the expected type, raises ResponseDecodeException.
    """

    @staticmethod
    def classify_status(response: requests.Response) -> Optional[MindatAPIException]:
        """Returns the exception matching a non-successful status, or None for 2xx responses"""
        status_code = response.status_code
        if 200 <= status_code < 300:
            return None
        if status_code == 401:
            return AuthenticationRequiredException()
        if status_code == 404:
            return NotFoundException(response.text)
        if status_code == 429:
            return RateLimitExceededException()
        return UpstreamAPIException(status_code, response.text)

    @staticmethod
    def decode(response: requests.Response, response_model: Optional[Any] = None) -> Any:
        """
        Parses the JSON body and validates it against `response_model`.

        Args:
            response (requests.Response): A successful response
            response_model (Optional[Any]): Any type pydantic can validate (a record, an envelope such as
                                            PaginatedResponse[Country], List[dict], ...). None returns plain JSON.

        Returns:
            Any: The decoded value

        Raises:
            ResponseDecodeException: if the body is not JSON or doesn't match the expected type
        """
        try:
            body = response.json()
        except (ValueError, RecursionError) as e:
            raise ResponseDecodeException(f"the body is not valid JSON: {e}", response.status_code) from e

        if response_model is None:
            return body

        try:
            return _type_adapter(response_model).validate_python(body)
        except ValidationError as e:
            raise ResponseDecodeException(str(e), response.status_code) from e
        except (ValueError, TypeError, OverflowError, RecursionError) as e:
            raise ResponseDecodeException(f"{type(e).__name__}: {e}", response.status_code) from e

    def handle(self, response: requests.Response, response_model: Optional[Any] = None) -> Any:
        """
        Classifies the status and decodes the body of a response.

        Raises:
            MindatAPIException: the classified failure, for any non-2xx status or undecodable body
        """
        error = self.classify_status(response)
        if error is not None:
            raise error
        data = self.decode(response, response_model)
        logger.debug("Decoded response from %s", response.url)
        return data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
