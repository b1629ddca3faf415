# utils/initializer.py
import logging
from typing import Any, Dict, Optional, Tuple

from mindat_api.utils.config_loader import ConfigLoader
from mindat_api.utils.logger import setup_logging
from mindat_api.security import SensitiveDataMasker, MaskingFilter

config_settings = ConfigLoader()

TRUTHY = ("1", "true", "yes", "on")


def _as_bool(value: Any) -> bool:
    return str(value).strip().lower() in TRUTHY


def _as_log_level(value: Any, default: int = logging.INFO) -> int:
    level = logging.getLevelName(str(value).strip().upper()) if value else default
    return level if isinstance(level, int) else default


def initialize_package(
    config_params: Optional[Dict[str, Any]] = None,
    env_path: Optional[str] = None,
    reload_env: bool = True,
) -> Tuple[Dict[str, Any], logging.Logger, SensitiveDataMasker]:
    """
    Loads the package configuration and prepares the `mindat_api` logger.

    The logger always carries a MaskingFilter so that API tokens never reach a handler in plain text.
    Console and rotating-file handlers are only installed when MINDAT_API_ENABLE_LOGGING is true;
    otherwise a NullHandler keeps the library silent unless the application configures logging itself.

    Args:
        config_params (Optional[Dict[str, Any]]): Values that override the environment and .env file
        env_path (Optional[str]): An explicit .env file to read
        reload_env (bool): Whether to read the .env file at all

    Returns:
        Tuple[Dict[str, Any], logging.Logger, SensitiveDataMasker]: The resolved config, the package logger,
        and the masker shared by the package
    """
    config = config_settings.load_config(reload_env=reload_env, env_path=env_path)
    if config_params:
        config.update(config_params)

    masker = SensitiveDataMasker()
    masker.register_secret(config.get("MINDAT_API_KEY"))
    masking_filter = MaskingFilter(masker)

    logger = logging.getLogger("mindat_api")
    logger.filters = [masking_filter]

    if _as_bool(config.get("MINDAT_API_ENABLE_LOGGING")):
        setup_logging(
            logger=logger,
            log_directory=config.get("MINDAT_API_LOG_DIRECTORY"),
            log_level=_as_log_level(config.get("MINDAT_API_LOG_LEVEL")),
            logging_filter=masking_filter,
        )
    else:
        null_handler = logging.NullHandler()
        null_handler.addFilter(masking_filter)
        logger.handlers = [null_handler]

    return config, logger, masker


def mask_package_loggers(package_logger: logging.Logger) -> None:
    """
    Adds the filters of the package logger to each of its child loggers created so far.

    Logger filters only run for records created on that logger. Copying them to the module loggers
    (`mindat_api.api.mindat_client`, ...) masks their records before any handler sees them, including
    handlers installed by a host application.
    """
    prefix = f"{package_logger.name}."
    for name, child in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith(prefix) or not isinstance(child, logging.Logger):
            continue
        for logging_filter in package_logger.filters:
            if logging_filter not in child.filters:
                child.addFilter(logging_filter)
