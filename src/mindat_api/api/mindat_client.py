from __future__ import annotations
from typing import Any, Dict, List, Optional, Type, Union
import logging
import requests
from pydantic import SecretStr
from mindat_api import masker as default_masker
from mindat_api.api.base_api import BaseAPI
from mindat_api.api.response_handler import ResponseHandler
from mindat_api.api.validators import join_url, validate_url
from mindat_api.api.models import (BaseQuery, PageQuery, Country, Geomaterial, GeomaterialsQuery,
                                   GeomaterialsSearchQuery, Locality, LocalityAge, LocalityStatus, LocalityType,
                                   LocalitiesQuery, ImaMaterial, ImaMineralsQuery, PaginatedResponse,
                                   CursorPaginatedResponse, ErrorResponse, ProcessedResponse, MindatClientConfig)
from mindat_api.exceptions import (MindatAPIException, APIParameterException, InvalidParameterException,
                                   InvalidURLException, RequestFailedException)
from mindat_api.security import SensitiveDataMasker, SecretUtils

logger = logging.getLogger(__name__)

Result = Union[ProcessedResponse, ErrorResponse]


class MindatClient(BaseAPI):
    """
    Client for the Mindat REST API.

    Every method sends exactly one GET request and never raises for request, status or decoding
    failures. A ProcessedResponse (truthy, typed value in `.data`) or an ErrorResponse (falsy,
    classified failure in `.error` and `.exception`) is returned instead.

    Example:
        >>> from mindat_api import MindatClient, GeomaterialsQuery
        >>> client = MindatClient(token="my-token")
        >>> result = client.geomaterials(GeomaterialsQuery().with_name("quartz").ima_approved(True))
        >>> if result:
        ...     for mineral in result.data:
        ...         print(mineral.id, mineral.name)
        ... else:
        ...     print(result.error, result.message)
    """

    def __init__(self,
                 token: Optional[str | SecretStr] = None,
                 base_url: Optional[str] = None,
                 timeout: float = 30,
                 connect_timeout: float = 10,
                 pool_maxsize: int = 5,
                 session: Optional[requests.Session] = None,
                 user_agent: Optional[str] = None,
                 masker: Optional[SensitiveDataMasker] = None):
        """
        Args:
            token (Optional[str | SecretStr]): The API token. None or an empty string creates an anonymous client.
            base_url (Optional[str]): The versioned API root. Defaults to DEFAULT_BASE_URL.
            timeout (float): Seconds to wait for the server to send data
            connect_timeout (float): Seconds to wait for the connection to be established
            pool_maxsize (int): The number of idle connections kept per host
            session (Optional[requests.Session]): A pre-configured session to send requests with
            user_agent (Optional[str]): Overrides the default browser-like User-Agent
            masker (Optional[SensitiveDataMasker]): Masks the token in log messages. Defaults to the package masker.

        Raises:
            InvalidURLException: if base_url is not an absolute http(s) URL
            APIParameterException: if a timeout or the pool size is out of range
        """
        if base_url is not None and not validate_url(base_url):
            raise InvalidURLException(base_url)

        config = MindatClientConfig.build(base_url=base_url, token=token, timeout=timeout,
                                          connect_timeout=connect_timeout, pool_maxsize=pool_maxsize)
        self._initialize(config, session=session, user_agent=user_agent, masker=masker)

    def _initialize(self,
                    config: MindatClientConfig,
                    session: Optional[requests.Session] = None,
                    user_agent: Optional[str] = None,
                    masker: Optional[SensitiveDataMasker] = None) -> None:
        super().__init__(user_agent=user_agent, session=session, timeout=config.timeout,
                         connect_timeout=config.connect_timeout, pool_maxsize=config.pool_maxsize)
        self.config = config
        self.masker = masker or default_masker
        self.masker.register_secret(config.token)
        self.response_handler = ResponseHandler()
        logger.debug("Initialized a new MindatClient for %s (authenticated=%s)", config.base_url,
                     self.is_authenticated)

    @classmethod
    def anonymous(cls, **kwargs: Any) -> MindatClient:
        """Creates a client that sends no Authorization header"""
        return cls(token=None, **kwargs)

    @classmethod
    def from_config(cls,
                    config: Optional[MindatClientConfig] = None,
                    session: Optional[requests.Session] = None,
                    user_agent: Optional[str] = None,
                    masker: Optional[SensitiveDataMasker] = None) -> MindatClient:
        """
        Creates a client from validated settings. Without a config, the MINDAT_API_* settings read
        from the environment and .env file on import are used.
        """
        client = cls.__new__(cls)
        client._initialize(config or MindatClientConfig.from_loader(), session=session,
                           user_agent=user_agent, masker=masker)
        return client

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def token(self) -> Optional[SecretStr]:
        return self.config.token

    @property
    def is_authenticated(self) -> bool:
        return self.config.token is not None

    def set_token(self, token: Optional[str | SecretStr]) -> None:
        """Replaces the token sent with subsequent requests. An empty token makes the client anonymous."""
        self.config = MindatClientConfig.build(**(self.config.model_dump() | {"token": token}))
        self.masker.register_secret(self.config.token)

    def clear_token(self) -> None:
        self.set_token(None)

    # request execution

    def execute_get(self,
                    path: str,
                    query: Optional[BaseQuery | Dict[str, Any]] = None,
                    response_model: Optional[Any] = None) -> Result:
        """
        Sends one GET request to `path` below the base URL and decodes the result.

        Args:
            path (str): The endpoint path, e.g. '/countries/' (a leading '/' is ignored)
            query (Optional[BaseQuery | Dict[str, Any]]): The query parameters. Unset query fields are not sent.
            response_model (Optional[Any]): The type to decode the JSON body into. None keeps plain JSON.

        Returns:
            ProcessedResponse | ErrorResponse: The decoded value, or the classified failure
        """
        url = join_url(self.base_url, path)
        params = self._resolve_parameters(query)
        response: Optional[requests.Response] = None

        try:
            headers = self.build_headers(SecretUtils.unmask_secret(self.config.token))
            response = self._send(url, params, headers)
            data = self.response_handler.handle(response, response_model)

        except MindatAPIException as e:
            return self._process_error(e, url=url, response=response)

        logger.info("Retrieved %s (status %s)", url, response.status_code)
        return ProcessedResponse(url=response.url or url, response=response, data=data)

    def _send(self, url: str, params: Dict[str, str], headers: Dict[str, str]) -> requests.Response:
        """Sends the request, converting transport failures into their classified exceptions"""
        try:
            return self.send_request(url, params=params, headers=headers)
        except requests.exceptions.InvalidHeader as e:
            raise InvalidParameterException(f"a header could not be sent: {e}") from e
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise InvalidURLException(str(e)) from e
        except requests.RequestException as e:
            raise RequestFailedException(e) from e

    def _query_get(self, path: str, query_type: Type[BaseQuery], response_model: Optional[Any] = None,
                   **values: Any) -> Result:
        """Builds a query from `values` and sends it. Invalid values are returned as an INVALID_PARAMETER error."""
        try:
            query = query_type.build(**values)
        except APIParameterException as e:
            return self._process_error(InvalidParameterException(str(e)), url=join_url(self.base_url, path))
        return self.execute_get(path, query, response_model)

    @staticmethod
    def _resolve_parameters(query: Optional[BaseQuery | Dict[str, Any]]) -> Dict[str, str]:
        if query is None:
            return {}
        if isinstance(query, BaseQuery):
            return query.to_params()
        formatted = {key: BaseQuery.format_value(value) for key, value in query.items() if value is not None}
        return {key: text for key, text in formatted.items() if text}

    def _process_error(self,
                       error: MindatAPIException,
                       url: Optional[str] = None,
                       response: Optional[requests.Response] = None) -> ErrorResponse:
        """Logs the classified failure and wraps it into an ErrorResponse"""
        logger.error("Request to %s failed: %s", url, error)
        if isinstance(error, RequestFailedException):
            logger.debug("Transport diagnostics: timeout=%s, connect=%s, url=%s",
                         error.is_timeout, error.is_connect, error.url or url)

        return ErrorResponse(url=url, response=response, error=error.kind, exception=error, message=str(error))

    # countries

    def countries(self) -> Result:
        """Lists the first page of countries as a PaginatedResponse[Country]"""
        return self.execute_get("/countries/", response_model=PaginatedResponse[Country])

    def countries_page(self, page: int) -> Result:
        return self._query_get("/countries/", PageQuery, PaginatedResponse[Country], page=page)

    def country(self, country_id: int) -> Result:
        return self.execute_get(f"/countries/{country_id}/", response_model=Country)

    # geomaterials

    def geomaterials(self, query: Optional[GeomaterialsQuery] = None) -> Result:
        """
        Lists geomaterials matching the query.

        Returns:
            ProcessedResponse | ErrorResponse: `.data` is a PaginatedResponse[Geomaterial] on success
        """
        return self.execute_get("/geomaterials/", query, PaginatedResponse[Geomaterial])

    def geomaterial(self, geomaterial_id: int) -> Result:
        return self.execute_get(f"/geomaterials/{geomaterial_id}/", response_model=Geomaterial)

    def geomaterial_varieties(self, geomaterial_id: int) -> Result:
        """Retrieves a geomaterial together with its varieties. The API answers with a single Geomaterial."""
        return self.execute_get(f"/geomaterials/{geomaterial_id}/varieties/", response_model=Geomaterial)

    def geomaterials_search(self, q: str, size: Optional[int] = None) -> Result:
        """
        Free-text search across geomaterials. The result entries are plain JSON objects since
        their shape differs from the Geomaterial record.
        """
        return self._query_get("/geomaterials-search/", GeomaterialsSearchQuery, List[Any], q=q, size=size)

    # localities

    def localities(self, query: Optional[LocalitiesQuery] = None) -> Result:
        """
        Lists localities matching the query. This endpoint is cursor-paginated: `.data` is a
        CursorPaginatedResponse[Locality] and `.data.next_cursor()` feeds `LocalitiesQuery.with_cursor`.
        """
        return self.execute_get("/localities/", query, CursorPaginatedResponse[Locality])

    def locality(self, locality_id: int) -> Result:
        return self.execute_get(f"/localities/{locality_id}/", response_model=Locality)

    def locality_ages(self, page: Optional[int] = None) -> Result:
        return self._query_get("/locality-age/", PageQuery, PaginatedResponse[LocalityAge], page=page)

    def locality_age(self, age_id: int) -> Result:
        return self.execute_get(f"/locality-age/{age_id}/", response_model=LocalityAge)

    def locality_statuses(self, page: Optional[int] = None) -> Result:
        return self._query_get("/locality-status/", PageQuery, PaginatedResponse[LocalityStatus], page=page)

    def locality_status(self, ls_id: int) -> Result:
        return self.execute_get(f"/locality-status/{ls_id}/", response_model=LocalityStatus)

    def locality_types(self, page: Optional[int] = None) -> Result:
        return self._query_get("/locality-type/", PageQuery, PaginatedResponse[LocalityType], page=page)

    def locality_type(self, lt_id: int) -> Result:
        return self.execute_get(f"/locality-type/{lt_id}/", response_model=LocalityType)

    def geo_regions(self, page: Optional[int] = None) -> Result:
        """Lists geographic regions. Regions carry GeoJSON geometry and are returned as plain JSON objects."""
        return self._query_get("/locgeoregion2/", PageQuery, PaginatedResponse[Dict[str, Any]], page=page)

    # IMA list

    def minerals_ima(self, query: Optional[ImaMineralsQuery] = None) -> Result:
        return self.execute_get("/minerals-ima/", query, PaginatedResponse[ImaMaterial])

    def mineral_ima(self, mineral_id: int) -> Result:
        """Retrieves one IMA mineral. The detail endpoint answers with the full Geomaterial record."""
        return self.execute_get(f"/minerals-ima/{mineral_id}/", response_model=Geomaterial)

    # classification schemes, returned as plain JSON

    def dana8_groups(self) -> Result:
        return self.execute_get("/dana-8/groups/")

    def dana8_subgroups(self) -> Result:
        return self.execute_get("/dana-8/subgroups/")

    def dana8(self, dana_id: int) -> Result:
        return self.execute_get(f"/dana-8/{dana_id}/")

    def strunz10_classes(self) -> Result:
        return self.execute_get("/nickel-strunz-10/classes/")

    def strunz10_subclasses(self) -> Result:
        return self.execute_get("/nickel-strunz-10/subclasses/")

    def strunz10_families(self) -> Result:
        return self.execute_get("/nickel-strunz-10/families/")

    def strunz10(self, strunz_id: int) -> Result:
        return self.execute_get(f"/nickel-strunz-10/{strunz_id}/")

    def photocount(self) -> Result:
        return self.execute_get("/photo-count/")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r}, authenticated={self.is_authenticated})"
