"""
The mindat_api.api module contains the client used to send requests to the Mindat API.

Modules:
    - validators.py: URL validation and the joining of endpoint paths onto the versioned base URL
    - base_api.py: BaseAPI, which owns the requests session, default headers, timeouts and connection pool
    - response_handler.py: Classifies status codes and decodes JSON bodies into typed values
    - mindat_client.py: MindatClient, with `execute_get` and one method per Mindat endpoint
    - models: records, query builders, pagination envelopes, response outcomes and client settings
"""
from mindat_api.api.validators import validate_url, normalize_base_url, join_url
from mindat_api.api.models import *  # noqa: F401,F403
from mindat_api.api.models import __all__ as _models_all
from mindat_api.api.base_api import BaseAPI, DEFAULT_USER_AGENT
from mindat_api.api.response_handler import ResponseHandler
from mindat_api.api.mindat_client import MindatClient

__all__ = [
    "validate_url",
    "normalize_base_url",
    "join_url",
    "BaseAPI",
    "DEFAULT_USER_AGENT",
    "ResponseHandler",
    "MindatClient",
] + list(_models_all)
