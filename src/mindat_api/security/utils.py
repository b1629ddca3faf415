from typing import Any, Optional
from pydantic import SecretStr


class SecretUtils:
    """
    Helper utility for masking and unmasking the API token. Class methods are defined
    so that they can be used directly or mixed into classes that hold credentials.
    """

    @classmethod
    def mask_secret(cls, obj: Any) -> Optional[SecretStr]:
        """
        Wraps a value into a SecretStr so that it is hidden from reprs and logs.

        Args:
            obj (Any | SecretStr): The value to mask. None is passed through unchanged.

        Returns:
            Optional[SecretStr]: A SecretStr representation of the original object

        Examples:
            >>> isinstance(SecretUtils.mask_secret('a secret'), SecretStr)
            True
            >>> SecretUtils.mask_secret(None) is None
            True
        """
        return obj if isinstance(obj, SecretStr) else SecretStr(str(obj)) if obj is not None else obj

    @classmethod
    def unmask_secret(cls, obj: Any) -> Any:
        """
        Unwraps a SecretStr into its plain value. Any other object is returned as is.

        Examples:
            >>> SecretUtils.unmask_secret(SecretUtils.mask_secret('a secret'))
            'a secret'
            >>> SecretUtils.unmask_secret(None) is None
            True
        """
        return obj.get_secret_value() if isinstance(obj, SecretStr) else obj
