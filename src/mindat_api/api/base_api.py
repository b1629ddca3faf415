from typing import Any, Dict, Optional
import re
import logging
import requests
from requests.adapters import HTTPAdapter
from mindat_api.exceptions import InvalidParameterException, SessionCreationError

logger = logging.getLogger(__name__)

# The API rejects some non-browser agents, so a common desktop browser string is sent by default
DEFAULT_USER_AGENT = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                      "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36")

INVALID_HEADER_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


class BaseAPI:
    def __init__(self,
                 user_agent: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 timeout: float = 30,
                 connect_timeout: float = 10,
                 pool_maxsize: int = 5):
        """
        Initializes the transport shared by every request: a session carrying the default headers
        and a connection pool, and the timeouts applied to each request.

        Args:
            user_agent (Optional[str]): The User-Agent sent with each request. Defaults to DEFAULT_USER_AGENT.
            session (Optional[requests.Session]): A pre-configured session or None to create a new session.
                                                  An injected session keeps its own adapters.
            timeout (float): Seconds to wait for the server to send data
            connect_timeout (float): Seconds to wait for the connection to be established
            pool_maxsize (int): The number of idle connections kept per host by a newly created session
        """
        self.user_agent: str = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self.pool_maxsize = pool_maxsize
        self.session: requests.Session = self.configure_session(session)

    def configure_session(self, session: Optional[requests.Session]) -> requests.Session:
        """
        Configures the session with the User-Agent and Accept headers. A new session is mounted
        with an HTTPAdapter that keeps `pool_maxsize` idle connections and never retries.

        Args:
            session (Optional[requests.Session]): A pre-configured session or None to create a new session.

        Returns:
            requests.Session: The configured session.

        Raises:
            SessionCreationError: if the connection pool cannot be created
        """
        if session is None:
            try:
                session = requests.Session()
                adapter = HTTPAdapter(pool_connections=1, pool_maxsize=self.pool_maxsize, max_retries=0)
                session.mount("https://", adapter)
                session.mount("http://", adapter)
            except (TypeError, ValueError) as e:
                raise SessionCreationError(f"Could not create a session with pool_maxsize={self.pool_maxsize}: {e}")

        session.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})
        logger.debug("API Session Initialization Successful.")
        return session

    @staticmethod
    def build_headers(token: Optional[str] = None) -> Dict[str, str]:
        """
        Builds the per-request headers. The Authorization header is only sent when a token is set.

        Args:
            token (Optional[str]): The plain API token

        Returns:
            Dict[str, str]: `{'Authorization': 'Token <token>'}`, or an empty dict for anonymous requests

        Raises:
            InvalidParameterException: if the token contains control characters or can't be encoded as latin-1
        """
        if not token:
            return {}
        if INVALID_HEADER_CHARACTERS.search(token):
            raise InvalidParameterException("the API token contains control characters and can't be sent as a header")
        try:
            token.encode("latin-1")
        except UnicodeEncodeError:
            raise InvalidParameterException("the API token contains characters that can't be sent as a header")
        return {"Authorization": f"Token {token}"}

    def prepare_request(self,
                        url: str,
                        params: Optional[Dict[str, Any]] = None,
                        headers: Optional[Dict[str, str]] = None) -> requests.PreparedRequest:
        """
        Prepares a GET request merged with the session headers.

        Args:
            url (str): The absolute URL of the endpoint
            params (Optional[Dict[str, Any]]): Optional query parameters for the request.
            headers (Optional[Dict[str, str]]): Headers added to the session defaults for this request only

        Returns:
            prepared_request (PreparedRequest) : The prepared request object.
        """
        request = requests.Request("GET", url, params=params or {}, headers=headers or {})
        return self.session.prepare_request(request)

    def send_request(self,
                     url: str,
                     params: Optional[Dict[str, Any]] = None,
                     headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """
        Sends exactly one GET request. Nothing is retried.

        Args:
            url (str): The absolute URL of the endpoint
            params (Optional[Dict[str, Any]]): Optional query parameters for the request.
            headers (Optional[Dict[str, str]]): Headers added for this request only

        Returns:
            requests.Response: The response object.
        """
        prepared_request = self.prepare_request(url, params, headers)
        logger.debug("Sending request to %s", prepared_request.url)
        return self.session.send(prepared_request, timeout=(self.connect_timeout, self.timeout))

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(user_agent={self.user_agent!r}, timeout={self.timeout}, "
                f"connect_timeout={self.connect_timeout})")
