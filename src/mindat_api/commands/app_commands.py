from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
import threading
import logging
from pydantic import BaseModel
from mindat_api.api import (MindatClient, BaseQuery, GeomaterialsQuery, ImaMineralsQuery, LocalitiesQuery,
                            CursorPaginatedResponse, Locality, ErrorResponse, ProcessedResponse)
from mindat_api.commands.geo import BoundingBox
from mindat_api.exceptions import APIParameterException, CommandError, RequestFailedException

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Client not configured. Set an API token first."
MISSING_LOCALITY_FILTER_MESSAGE = "Please specify a country or name filter to narrow down the search"

QueryT = TypeVar("QueryT", bound=BaseQuery)


def to_json(value: Any) -> Any:
    """Converts decoded records and envelopes into JSON-compatible values. Plain JSON passes through."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value


class MindatCommands:
    """
    The command surface of a desktop or CLI front end.

    Holds at most one MindatClient. Each command takes a snapshot of the client reference under a
    lock, so replacing or clearing the client never affects a call that is already running.
    Commands return JSON-compatible values and raise CommandError with a display message on failure.

    Example:
        >>> commands = MindatCommands()
        >>> commands.set_api_token("my-token")
        'API token set successfully'
    """

    def __init__(self, client_factory: Optional[Callable[..., MindatClient]] = None):
        """
        Args:
            client_factory (Optional[Callable[..., MindatClient]]): Builds clients from a `token` keyword
                                                                    argument. Defaults to MindatClient.
        """
        self._client_factory = client_factory or MindatClient
        self._client: Optional[MindatClient] = None
        self._lock = threading.Lock()

    # client lifecycle

    def set_api_token(self, token: str) -> str:
        """Configures the client. An empty token configures an anonymous client."""
        logger.debug("set_api_token called, token empty: %s", not token)
        client = self._client_factory(token=token or None)
        with self._lock:
            self._client = client
        logger.debug("Client configured successfully")
        return "API token set successfully"

    def is_configured(self) -> bool:
        with self._lock:
            return self._client is not None

    def clear_client(self) -> str:
        with self._lock:
            self._client = None
        logger.debug("Client cleared")
        return "Client cleared"

    def get_client(self) -> MindatClient:
        """
        Returns a snapshot of the configured client.

        Raises:
            CommandError: if no client has been configured
        """
        with self._lock:
            client = self._client
        if client is None:
            raise CommandError(NOT_CONFIGURED_MESSAGE)
        return client

    @staticmethod
    def unwrap(result: ProcessedResponse | ErrorResponse) -> Any:
        """
        Returns the decoded data of a successful result.

        Raises:
            CommandError: carrying the error message of a failed result
        """
        if isinstance(result, ErrorResponse):
            if isinstance(result.exception, RequestFailedException):
                logger.debug("Is timeout: %s", result.exception.is_timeout)
                logger.debug("Is connect: %s", result.exception.is_connect)
                logger.debug("URL: %s", result.exception.url or result.url)
            logger.debug("Query failed: %s", result.message)
            raise CommandError(result.message or result.error.value)
        return result.data

    @staticmethod
    def build_query(query_type: Type[QueryT], **values: Any) -> QueryT:
        """
        Builds a query from command arguments.

        Raises:
            CommandError: carrying the validation message when an argument is out of range
        """
        try:
            return query_type.build(**values)
        except APIParameterException as e:
            logger.debug("Rejected command arguments %s: %s", values, e)
            raise CommandError(str(e)) from e

    # geomaterials

    def search_minerals(self, name: str, page: Optional[int] = None, page_size: Optional[int] = None) -> Dict[str, Any]:
        logger.debug("search_minerals called: name=%r, page=%s, page_size=%s", name, page, page_size)
        client = self.get_client()
        query = self.build_query(GeomaterialsQuery, name=name, page=page, page_size=page_size)
        envelope = self.unwrap(client.geomaterials(query))
        logger.debug("Got %d results", len(envelope))
        return to_json(envelope)

    def search_ima_minerals(self,
                            search: str = "",
                            page: Optional[int] = None,
                            page_size: Optional[int] = None) -> Dict[str, Any]:
        """Searches the IMA list. The endpoint works without a token, so an anonymous client is used when none is set."""
        logger.debug("search_ima_minerals called: search=%r, page=%s, page_size=%s", search, page, page_size)
        with self._lock:
            client = self._client
        if client is None:
            logger.debug("Creating anonymous client")
            client = self._client_factory(token=None)

        query = self.build_query(ImaMineralsQuery, q=search or None, page=page, page_size=page_size)
        envelope = self.unwrap(client.minerals_ima(query))
        logger.debug("Got %d results", len(envelope))
        return to_json(envelope)

    def get_mineral(self, mineral_id: int) -> Dict[str, Any]:
        logger.debug("get_mineral called: id=%s", mineral_id)
        return to_json(self.unwrap(self.get_client().geomaterial(mineral_id)))

    def search_by_elements(self,
                           include_elements: str,
                           exclude_elements: Optional[str] = None,
                           page: Optional[int] = None) -> Dict[str, Any]:
        logger.debug("search_by_elements called: include=%r, exclude=%r, page=%s",
                     include_elements, exclude_elements, page)
        client = self.get_client()
        query = self.build_query(GeomaterialsQuery, elements_inc=include_elements, elements_exc=exclude_elements,
                                 page=page)
        envelope = self.unwrap(client.geomaterials(query))
        logger.debug("Got %d results", len(envelope))
        return to_json(envelope)

    def quick_search(self, query: str, size: Optional[int] = None) -> List[Any]:
        logger.debug("quick_search called: query=%r, size=%s", query, size)
        results = self.unwrap(self.get_client().geomaterials_search(query, size))
        logger.debug("Got %d results", len(results))
        return to_json(results)

    # countries

    def list_countries(self, page: Optional[int] = None) -> Dict[str, Any]:
        logger.debug("list_countries called: page=%s", page)
        client = self.get_client()
        result = client.countries_page(page) if page is not None else client.countries()
        return to_json(self.unwrap(result))

    def get_country(self, country_id: int) -> Dict[str, Any]:
        logger.debug("get_country called: id=%s", country_id)
        return to_json(self.unwrap(self.get_client().country(country_id)))

    # localities

    def search_localities(self, country: Optional[str] = None, name_contains: Optional[str] = None) -> Dict[str, Any]:
        logger.debug("search_localities called: country=%r, name_contains=%r", country, name_contains)
        client = self.get_client()
        query = self.build_query(LocalitiesQuery, country=country, txt=name_contains)
        envelope = self.unwrap(client.localities(query))
        logger.debug("Got %d localities", len(envelope))
        return to_json(envelope)

    def get_locality(self, locality_id: int) -> Dict[str, Any]:
        logger.debug("get_locality called: id=%s", locality_id)
        return to_json(self.unwrap(self.get_client().locality(locality_id)))

    def search_localities_by_gps(self,
                                 latitude: float,
                                 longitude: float,
                                 radius_km: float,
                                 country: Optional[str] = None,
                                 name_contains: Optional[str] = None) -> Dict[str, Any]:
        """
        Lists the localities within `radius_km` of a point.

        The API has no spatial filter, so the first page of localities matching the country and
        name filters is fetched and then filtered against a bounding box around the point.
        Localities without coordinates are dropped. Only that first page is considered.

        Raises:
            CommandError: if neither a country nor a name filter is given, or the request fails
        """
        logger.debug("search_localities_by_gps called: lat=%s, lon=%s, radius=%skm, country=%r, name=%r",
                     latitude, longitude, radius_km, country, name_contains)

        if not country and not name_contains:
            raise CommandError(MISSING_LOCALITY_FILTER_MESSAGE)

        client = self.get_client()
        box = BoundingBox.from_radius(latitude, longitude, radius_km)
        logger.debug("Bounding box: lat=[%s, %s], lon=[%s, %s]", box.min_lat, box.max_lat, box.min_lon, box.max_lon)

        query = self.build_query(LocalitiesQuery, country=country or None, txt=name_contains or None)
        envelope = self.unwrap(client.localities(query))
        logger.debug("Got %d localities, filtering by GPS...", len(envelope))

        filtered = self._retain(envelope, lambda locality: box.contains(locality.latitude, locality.longitude))
        logger.debug("Found %d localities within %skm", len(filtered), radius_km)
        return to_json(filtered)

    def search_localities_by_elements(self,
                                      include_elements: str,
                                      exclude_elements: Optional[str] = None) -> Dict[str, Any]:
        """Lists localities with the given elements, keeping only those that have coordinates"""
        logger.debug("search_localities_by_elements called: include=%r, exclude=%r",
                     include_elements, exclude_elements)
        client = self.get_client()
        query = self.build_query(LocalitiesQuery, elements_inc=include_elements, elements_exc=exclude_elements)
        envelope = self.unwrap(client.localities(query))

        filtered = self._retain(envelope, lambda locality: locality.has_coordinates)
        logger.debug("%d localities have GPS coordinates", len(filtered))
        return to_json(filtered)

    @staticmethod
    def _retain(envelope: CursorPaginatedResponse[Locality],
                keep: Callable[[Locality], bool]) -> CursorPaginatedResponse[Locality]:
        return envelope.model_copy(update={"results": [locality for locality in envelope.results if keep(locality)]})

    # classification schemes and statistics

    def get_dana8_groups(self) -> Any:
        logger.debug("get_dana8_groups called")
        return self.unwrap(self.get_client().dana8_groups())

    def get_strunz10_classes(self) -> Any:
        logger.debug("get_strunz10_classes called")
        return self.unwrap(self.get_client().strunz10_classes())

    def get_photo_count(self) -> Any:
        logger.debug("get_photo_count called")
        return self.unwrap(self.get_client().photocount())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(configured={self.is_configured()})"
