from __future__ import annotations
from typing import Any, ClassVar, Optional
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator
from mindat_api.api.validators import validate_url, normalize_base_url
from mindat_api.exceptions import APIParameterException
from mindat_api.security import SecretUtils
from mindat_api.utils import ConfigLoader, config_settings
import logging

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mindat.org/v1/"


class MindatClientConfig(BaseModel):
    """
    Validated settings for a MindatClient.

    Args:
        base_url (str): The versioned API root. A trailing slash is added when missing so that
                        endpoint paths are resolved below it rather than replacing its last segment.
        token (Optional[SecretStr]): The API token. When None, requests are sent without credentials.
        timeout (float): Total seconds to wait for the server to send data
        connect_timeout (float): Seconds to wait for the connection to be established
        pool_maxsize (int): Maximum number of idle connections kept per host
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(str_strip_whitespace=True)

    base_url: str = DEFAULT_BASE_URL
    token: Optional[SecretStr] = None
    timeout: float = Field(30.0, gt=0)
    connect_timeout: float = Field(10.0, gt=0)
    pool_maxsize: int = Field(5, ge=1)

    @field_validator("base_url")
    def validate_base_url(cls, v: str) -> str:
        """Validates the base URL and raises an APIParameterException if invalid"""
        if not isinstance(v, str) or not validate_url(v):
            logger.error(f"The URL provided to the MindatClientConfig is invalid: {v}")
            raise APIParameterException(f"The URL provided to the MindatClientConfig is invalid: {v}")
        return normalize_base_url(v)

    @field_validator("token", mode="before")
    def mask_token(cls, v: Any) -> Optional[SecretStr]:
        """Wraps the token into a SecretStr. Empty tokens are treated as no token."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return SecretUtils.mask_secret(v)

    @classmethod
    def build(cls, **values: Any) -> MindatClientConfig:
        """Creates a config, converting validation errors into APIParameterException"""
        try:
            return cls(**{key: value for key, value in values.items() if value is not None})
        except ValidationError as e:
            raise APIParameterException(f"Invalid MindatClientConfig: {e}") from e

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> MindatClientConfig:
        """
        Builds the config from the MINDAT_API_* settings of a ConfigLoader.

        Args:
            loader (Optional[ConfigLoader]): The loader to read. Defaults to the package-wide loader
                                             populated on import.

        Returns:
            MindatClientConfig: The validated settings
        """
        settings = (loader or config_settings).config
        return cls.build(
            base_url=settings.get("MINDAT_API_BASE_URL") or None,
            token=settings.get("MINDAT_API_KEY"),
            timeout=settings.get("MINDAT_API_TIMEOUT") or None,
            connect_timeout=settings.get("MINDAT_API_CONNECT_TIMEOUT") or None,
        )

    @property
    def has_token(self) -> bool:
        return self.token is not None

    def __repr__(self) -> str:
        return (f"MindatClientConfig(base_url={self.base_url!r}, token={'***' if self.token else None}, "
                f"timeout={self.timeout}, connect_timeout={self.connect_timeout}, pool_maxsize={self.pool_maxsize})")


__all__ = ["DEFAULT_BASE_URL", "MindatClientConfig"]
