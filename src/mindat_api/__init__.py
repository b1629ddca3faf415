from mindat_api.package_metadata import __version__
from mindat_api.utils.initializer import initialize_package, mask_package_loggers

config, logger, masker = initialize_package()

from mindat_api.exceptions import (ErrorKind, MindatAPIException, APIParameterException, CommandError)
from mindat_api.api.models import (Country, Geomaterial, Relation, MinStats, Locality, LocalityAge, LocalityStatus,
                                   LocalityType, ImaMaterial, GeomaterialsQuery, GeomaterialsSearchQuery,
                                   LocalitiesQuery, ImaMineralsQuery, PageQuery, PaginatedResponse,
                                   CursorPaginatedResponse, ProcessedResponse, ErrorResponse, EntryType,
                                   GeomaterialsOrdering, MindatClientConfig, DEFAULT_BASE_URL)
from mindat_api.api import BaseAPI, ResponseHandler, MindatClient
from mindat_api.commands import MindatCommands

mask_package_loggers(logger)

__all__ = ["__version__", "config", "logger", "masker", "ErrorKind", "MindatAPIException", "APIParameterException",
           "CommandError", "Country", "Geomaterial", "Relation", "MinStats", "Locality", "LocalityAge",
           "LocalityStatus", "LocalityType", "ImaMaterial", "GeomaterialsQuery", "GeomaterialsSearchQuery",
           "LocalitiesQuery", "ImaMineralsQuery", "PageQuery", "PaginatedResponse", "CursorPaginatedResponse",
           "ProcessedResponse", "ErrorResponse", "EntryType", "GeomaterialsOrdering", "MindatClientConfig",
           "DEFAULT_BASE_URL", "BaseAPI", "ResponseHandler", "MindatClient", "MindatCommands"]
