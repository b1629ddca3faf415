"""
The mindat_api.api.models module defines the typed shapes exchanged with the Mindat API.

Modules:
    - decoders.py: Total functions (and pydantic field aliases) that tolerate the API's inconsistent
                   encodings of numbers, lists and nested objects
    - base.py: MindatRecord, the frozen base of every decoded entity, and BaseQuery/PageQuery, the
               immutable query builders serialized into query strings
    - enums.py: Enumerated filter values and the geomaterials sort orders
    - common.py, countries.py, geomaterials.py, localities.py, minerals_ima.py: Records and queries per resource
    - pagination.py: The page-number and cursor envelopes wrapping list endpoints
    - response.py: ProcessedResponse and ErrorResponse, the two outcomes of every request
    - config.py: MindatClientConfig, the validated client settings
"""
from mindat_api.api.models.decoders import (decode_optional_float, decode_optional_int, decode_optional_int16,
                                            decode_optional_uint32, decode_optional_str, decode_optional_str_list,
                                            decode_optional_int_list, decode_optional_model,
                                            decode_optional_model_list, LenientFloat, LenientInt, LenientInt16,
                                            LenientUInt32, LenientStr, LenientStrList, LenientIntList,
                                            lenient_model, lenient_model_list)
from mindat_api.api.models.base import MindatRecord, BaseQuery, PageQuery
from mindat_api.api.models.enums import (CrystalSystem, CleavageType, Diapheny, EntryType, FractureType,
                                         LustreType, Tenacity, OpticalType, OpticalSign, ImaStatus, ImaNotes,
                                         GeomaterialsOrdering)
from mindat_api.api.models.common import Relation, MinStats
from mindat_api.api.models.countries import Country
from mindat_api.api.models.geomaterials import Geomaterial, GeomaterialsQuery, GeomaterialsSearchQuery
from mindat_api.api.models.localities import (Locality, LocalityAge, LocalityStatus, LocalityType,
                                              LocalitiesQuery)
from mindat_api.api.models.minerals_ima import ImaMaterial, ImaMineralsQuery
from mindat_api.api.models.pagination import PageNavigation, PaginatedResponse, CursorPaginatedResponse
from mindat_api.api.models.response import APIResponse, ErrorResponse, ProcessedResponse
from mindat_api.api.models.config import DEFAULT_BASE_URL, MindatClientConfig

__all__ = [
    "decode_optional_float",
    "decode_optional_int",
    "decode_optional_int16",
    "decode_optional_uint32",
    "decode_optional_str",
    "decode_optional_str_list",
    "decode_optional_int_list",
    "decode_optional_model",
    "decode_optional_model_list",
    "LenientFloat",
    "LenientInt",
    "LenientInt16",
    "LenientUInt32",
    "LenientStr",
    "LenientStrList",
    "LenientIntList",
    "lenient_model",
    "lenient_model_list",
    "MindatRecord",
    "BaseQuery",
    "PageQuery",
    "CrystalSystem",
    "CleavageType",
    "Diapheny",
    "EntryType",
    "FractureType",
    "LustreType",
    "Tenacity",
    "OpticalType",
    "OpticalSign",
    "ImaStatus",
    "ImaNotes",
    "GeomaterialsOrdering",
    "Relation",
    "MinStats",
    "Country",
    "Geomaterial",
    "GeomaterialsQuery",
    "GeomaterialsSearchQuery",
    "Locality",
    "LocalityAge",
    "LocalityStatus",
    "LocalityType",
    "LocalitiesQuery",
    "ImaMaterial",
    "ImaMineralsQuery",
    "PageNavigation",
    "PaginatedResponse",
    "CursorPaginatedResponse",
    "APIResponse",
    "ErrorResponse",
    "ProcessedResponse",
    "DEFAULT_BASE_URL",
    "MindatClientConfig",
]
