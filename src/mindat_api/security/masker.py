import re
import threading
from typing import Any, Optional, Set
from pydantic import SecretStr
from mindat_api.security.utils import SecretUtils


class SensitiveDataMasker:
    """
    Masks credentials in free text before it reaches a log handler.

    Two rules are applied:
        - any `Authorization: Token <value>` or `Token <value>` fragment has its value replaced
        - any secret registered through `register_secret` is replaced wherever it appears

    Example:
        >>> masker = SensitiveDataMasker()
        >>> masker.mask_text("Authorization: Token abc123")
        'Authorization: Token ***'
        >>> masker.register_secret("abc123")
        >>> masker.mask_text("sent abc123 upstream")
        'sent *** upstream'
    """

    MASK: str = "***"
    TOKEN_PATTERN = re.compile(r"(\bToken\s+)([^\s'\",}]+)")

    def __init__(self, secrets: Optional[Set[str]] = None):
        self._secrets: Set[str] = set(secrets or ())
        self._lock = threading.Lock()

    def register_secret(self, secret: Optional[str | SecretStr]) -> None:
        """Adds a secret value (plain or SecretStr) to the set of strings masked in every message"""
        value = SecretUtils.unmask_secret(secret)
        if value:
            with self._lock:
                self._secrets.add(str(value))

    def unregister_secret(self, secret: Optional[str | SecretStr]) -> None:
        value = SecretUtils.unmask_secret(secret)
        with self._lock:
            self._secrets.discard(str(value))

    def mask_text(self, text: Any) -> Any:
        """Returns the text with every sensitive fragment replaced. Non-string input is returned unchanged."""
        if not isinstance(text, str):
            return text

        masked = self.TOKEN_PATTERN.sub(lambda match: f"{match.group(1)}{self.MASK}", text)
        with self._lock:
            secrets = sorted(self._secrets, key=len, reverse=True)
        for secret in secrets:
            masked = masked.replace(secret, self.MASK)
        return masked

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(secrets={len(self._secrets)})"
