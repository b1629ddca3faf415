"""
The mindat_api.utils module contains the helpers shared across the package.

Modules:
    - initializer.py: Loads the package configuration and prepares the `mindat_api` logger on import.

    - logger.py: Contains setup_logging, used to set the logging level and output location (console and
                 rotating file) for package logs.

    - config_loader.py: Holds the ConfigLoader class that reads MINDAT_API_* keys from the environment
                        and an optional .env file (API token, base URL, timeouts, logging switches).

    - helpers.py: Small conversion helpers, including the tolerant query-string reader used by the
                  pagination envelopes.
"""

from mindat_api.utils.logger import setup_logging
from mindat_api.utils.config_loader import ConfigLoader
from mindat_api.utils.initializer import config_settings, initialize_package, mask_package_loggers
from mindat_api.utils.helpers import try_int, get_query_parameter

__all__ = [
    "setup_logging",
    "ConfigLoader",
    "config_settings",
    "initialize_package",
    "mask_package_loggers",
    "try_int",
    "get_query_parameter",
]
