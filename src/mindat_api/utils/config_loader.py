import os
import logging
from dotenv import set_key, load_dotenv, dotenv_values

from pathlib import Path
from typing import Dict, Any, Optional, Union

config_logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Utility class for loading mindat_api settings from the environment and an optional .env file.

    Keys recognized by the package:
        - MINDAT_API_KEY: the token sent as `Authorization: Token <key>`
        - MINDAT_API_BASE_URL: overrides the default versioned API root
        - MINDAT_API_TIMEOUT / MINDAT_API_CONNECT_TIMEOUT: transport timeouts in seconds
        - MINDAT_API_ENABLE_LOGGING / MINDAT_API_LOG_LEVEL / MINDAT_API_LOG_DIRECTORY: logging setup
    """

    DEFAULT_ENV_PATH: Path = Path.cwd() / '.env'

    ENV_KEYS = ('MINDAT_API_KEY', 'MINDAT_API_BASE_URL', 'MINDAT_API_TIMEOUT', 'MINDAT_API_CONNECT_TIMEOUT',
                'MINDAT_API_ENABLE_LOGGING', 'MINDAT_API_LOG_LEVEL', 'MINDAT_API_LOG_DIRECTORY')

    DEFAULTS: Dict[str, Any] = {
        'MINDAT_API_LOG_LEVEL': 'INFO',
        'MINDAT_API_ENABLE_LOGGING': 'FALSE',
    }

    def __init__(self, env_path: Optional[Path | str] = None):
        self.env_path: Path = self._process_env_path(env_path)
        self.config: Dict[str, Any] = self.load_os_environment()

    @classmethod
    def load_os_environment(cls) -> Dict[str, Any]:
        """Reads the recognized keys from the current environment, falling back to the package defaults"""
        return {key: os.getenv(key) or cls.DEFAULTS.get(key) for key in cls.ENV_KEYS}

    def try_loadenv(self, env_path: Optional[Path | str] = None, verbose: bool = False) -> Dict[str, Any]:
        """
        Try to load environment variables from a specified .env file into the environment and return as a dict.
        """
        env_path = self._process_env_path(env_path or self.env_path)
        if load_dotenv(env_path):
            return dotenv_values(env_path)
        if verbose:
            config_logger.debug("No environment file located at %s. Loading defaults.", env_path)
        return {}

    def load_config(self, reload_env: bool = False, env_path: Optional[Path | str] = None,
                    verbose: bool = False) -> Dict[str, Any]:
        """
        Load configuration settings, optionally re-reading a .env file first. Values from the
        .env file override the environment snapshot taken at construction.
        """
        if reload_env:
            env_path = self._process_env_path(env_path or self.env_path)
            if verbose:
                config_logger.debug("Attempting to load environment file located at %s.", env_path)
            env_config = self.try_loadenv(env_path, verbose=verbose)
            self.config.update({k: v for k, v in env_config.items() if k in self.ENV_KEYS and v is not None})
        return self.config

    def save_config(self, env_path: Optional[Path | str] = None) -> None:
        """
        Save configuration settings to a .env file.
        """
        env_path = env_path or self.env_path
        for key, value in self.config.items():
            if value is not None:
                self.write_key(key, str(value), env_path)

    def write_key(self, key_name: str, key_value: str, env_path: Optional[Path | str] = None,
                  create: bool = True) -> None:
        """
        Write a key-value pair to a .env file.
        """
        env_path = Path(env_path) if env_path else self.env_path
        try:
            if create and not env_path.exists():
                env_path.touch()
            set_key(str(env_path), key_name, key_value)
        except IOError as e:
            config_logger.error("Failed to create .env file at %s: %s", env_path, e)

    @classmethod
    def _process_env_path(cls, env_path: Optional[Union[str, Path]]) -> Path:
        """Try to load from the provided `env_path` variable first. Otherwise try to load from DEFAULT_ENV_PATH"""
        if not env_path:
            return cls.DEFAULT_ENV_PATH

        raw_env_path = Path(str(env_path))
        return raw_env_path.resolve() if raw_env_path.exists() else cls.DEFAULT_ENV_PATH
