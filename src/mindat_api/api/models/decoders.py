"""
Tolerant decoding of the field encodings returned by the Mindat API.

The API is inconsistent about how it encodes missing or single values:
    - numeric fields may arrive as a JSON number, a numeric string, an empty string or null
    - list fields (elements, ima_status, ...) may arrive as a list, a bare string, an empty string or null
    - nested objects and lists of objects are occasionally malformed

Every decoder here is a total function: it returns a value or None and never raises. Numeric strings
that fail to parse, numbers outside the float range, and numeric strings padded with whitespace or
written with digit-group underscores ("1_000") become None rather than failing the record, so a single
bad attribute never hides the rest of an entry. The Lenient* aliases attach these decoders to pydantic fields.
"""
import math
import logging
from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

INT16_RANGE = (-(2**15), 2**15 - 1)
INT32_RANGE = (-(2**31), 2**31 - 1)
UINT32_RANGE = (0, 2**32 - 1)


def _is_numeric_text(raw: str) -> bool:
    """Numeric strings are accepted without surrounding whitespace or digit-group underscores"""
    return raw != "" and raw == raw.strip() and "_" not in raw


def decode_optional_float(raw: Any) -> Optional[float]:
    """
    Decodes a number that may be encoded as a number, a numeric string, an empty string or null.

    Examples:
        >>> decode_optional_float("7.5")
        7.5
        >>> decode_optional_float("") is None
        True
        >>> decode_optional_float("n/a") is None
        True
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str) and not _is_numeric_text(raw):
        if raw:
            logger.debug("Discarding unparseable numeric value %r", raw)
        return None
    if not isinstance(raw, (int, float, str)):
        return None
    try:
        return float(raw)
    except (ValueError, OverflowError):
        logger.debug("Discarding numeric value outside the float range or unparseable: %r", raw)
        return None


def _decode_optional_integer(raw: Any, bounds: tuple[int, int]) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None

    value: Optional[int] = None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        # integral floats (7.0) are accepted, fractional ones are not integers
        if math.isfinite(raw) and raw.is_integer():
            value = int(raw)
    elif isinstance(raw, str) and _is_numeric_text(raw):
        try:
            value = int(raw)
        except ValueError:
            logger.debug("Discarding unparseable integer value %r", raw)

    if value is None or not bounds[0] <= value <= bounds[1]:
        return None
    return value


def decode_optional_int(raw: Any) -> Optional[int]:
    """
    Decodes a signed 32-bit integer with the same leniency as `decode_optional_float`.

    Examples:
        >>> decode_optional_int("12")
        12
        >>> decode_optional_int("12.5") is None
        True
    """
    return _decode_optional_integer(raw, INT32_RANGE)


def decode_optional_int16(raw: Any) -> Optional[int]:
    """Decodes a signed 16-bit integer (sort orders and similar small codes)."""
    return _decode_optional_integer(raw, INT16_RANGE)


def decode_optional_uint32(raw: Any) -> Optional[int]:
    """Decodes an unsigned 32-bit integer (years). Negative values are absent."""
    return _decode_optional_integer(raw, UINT32_RANGE)


def decode_optional_str(raw: Any) -> Optional[str]:
    """
    Decodes a free-text field. Strings are kept as sent (including empty strings), numbers are
    converted to their text form, anything else is absent.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return None


def decode_optional_str_list(raw: Any) -> Optional[List[str]]:
    """
    Decodes a list of strings that may be sent as a list, a bare string, an empty string or null.

    Examples:
        >>> decode_optional_str_list("Au")
        ['Au']
        >>> decode_optional_str_list(["Au", "Ag"])
        ['Au', 'Ag']
        >>> decode_optional_str_list("") is None
        True
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return [raw] if raw else None
    if isinstance(raw, list):
        items = [decode_optional_str(item) for item in raw]
        return [item for item in items if item is not None]
    return None


def decode_optional_int_list(raw: Any) -> Optional[List[int]]:
    """
    Decodes a list of integer ids. A bare string can't be read as a list of integers, so it is
    absent, as is a list holding any entry that is not an integer.
    """
    if not isinstance(raw, list):
        return None
    items = [decode_optional_int(item) for item in raw]
    if any(item is None for item in items):
        logger.debug("Discarding malformed integer list %r", raw)
        return None
    return items  # type: ignore[return-value]


def decode_optional_model(raw: Any, model: Type[ModelT]) -> Optional[ModelT]:
    """Decodes a nested object into `model`, or None when the value is missing or malformed."""
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, dict):
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.debug("Discarding malformed %s: %s", model.__name__, e)
        return None


def decode_optional_model_list(raw: Any, model: Type[ModelT]) -> Optional[List[ModelT]]:
    """
    Decodes a list of nested objects. A bare string (empty or not) is absent rather than being
    coerced into a structured element, and a single malformed element makes the whole field absent.
    """
    if not isinstance(raw, list):
        return None
    items = [decode_optional_model(item, model) for item in raw]
    if any(item is None for item in items):
        return None
    return items  # type: ignore[return-value]


LenientFloat = Annotated[Optional[float], BeforeValidator(decode_optional_float)]
LenientInt = Annotated[Optional[int], BeforeValidator(decode_optional_int)]
LenientInt16 = Annotated[Optional[int], BeforeValidator(decode_optional_int16)]
LenientUInt32 = Annotated[Optional[int], BeforeValidator(decode_optional_uint32)]
LenientStr = Annotated[Optional[str], BeforeValidator(decode_optional_str)]
LenientStrList = Annotated[Optional[List[str]], BeforeValidator(decode_optional_str_list)]
LenientIntList = Annotated[Optional[List[int]], BeforeValidator(decode_optional_int_list)]


def lenient_model(model: Type[ModelT]) -> Any:
    """Builds an annotated optional field type that decodes a nested object with `decode_optional_model`"""
    return Annotated[Optional[model], BeforeValidator(lambda raw: decode_optional_model(raw, model))]  # type: ignore[valid-type]


def lenient_model_list(model: Type[ModelT]) -> Any:
    """Builds an annotated optional field type that decodes a list of objects with `decode_optional_model_list`"""
    return Annotated[Optional[List[model]], BeforeValidator(lambda raw: decode_optional_model_list(raw, model))]  # type: ignore[valid-type]


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
]
