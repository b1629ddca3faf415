from __future__ import annotations
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from mindat_api.exceptions import APIParameterException
import logging

logger = logging.getLogger(__name__)

QueryT = TypeVar("QueryT", bound="BaseQuery")


class MindatRecord(BaseModel):
    """
    Base class for every decoded Mindat entity.

    Records are immutable value objects: they compare structurally and keep any attribute the API
    returns beyond the declared fields. Declared fields use the Lenient* types from
    `mindat_api.api.models.decoders` so that a single badly encoded attribute is dropped instead
    of failing the whole record.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class BaseQuery(BaseModel):
    """
    Immutable accumulator of optional filter values for a list endpoint.

    Every fluent setter returns a new, re-validated query and leaves the original untouched,
    so partially built queries can be shared and extended safely:

        >>> base = GeomaterialsQuery().ima_approved(True)
        >>> quartz = base.with_name("quartz")
        >>> base.to_params()
        {'ima': 'true'}

    Fields that are unset are never sent. `to_params` produces the upstream parameter names
    in declaration order, using the serialization alias where a field name differs from the upstream one.

    Subclasses may list (min, max) field pairs in RANGE_FIELDS; both bounds are checked together.
    """

    model_config = ConfigDict(frozen=True)

    RANGE_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = ()

    @model_validator(mode="after")
    def _check_ranges(self) -> "BaseQuery":
        """Rejects any range whose lower bound exceeds its upper bound"""
        for lower_field, upper_field in self.RANGE_FIELDS:
            lower, upper = getattr(self, lower_field), getattr(self, upper_field)
            if lower is not None and upper is not None and lower > upper:
                raise ValueError(f"{lower_field} ({lower}) must not exceed {upper_field} ({upper})")
        return self

    @classmethod
    def build(cls: Type[QueryT], **values: Any) -> QueryT:
        """
        Creates a query from keyword arguments, converting validation errors into APIParameterException.

        Args:
            **values: field names and their values

        Returns:
            QueryT: The validated query
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise APIParameterException(f"Invalid {cls.__name__}: {e}") from e

    def _updated(self: QueryT, **changes: Any) -> QueryT:
        """Returns a copy of the current query with `changes` applied, validating the result as a whole"""
        current = {name: getattr(self, name) for name in self.__class__.model_fields}
        return self.build(**(current | changes))

    def to_params(self) -> Dict[str, str]:
        """
        Serializes the populated fields into query-string parameters.

        Returns:
            Dict[str, str]: upstream parameter names mapped to their text values. Unset fields and
            values that format to an empty string (empty text, empty lists) are omitted.
        """
        params: Dict[str, str] = {}
        for name, field in self.__class__.model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            text = self.format_value(value)
            if text:
                params[field.serialization_alias or name] = text
        return params

    @classmethod
    def format_value(cls, value: Any) -> str:
        """
        Converts a single query value into its text form.

        Booleans are lower-cased (`true`/`false`), enums use their upstream token and lists are
        comma-joined.
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return ",".join(cls.format_value(item) for item in value)
        return str(value)

    def __bool__(self) -> bool:
        """A query is truthy when at least one filter is set"""
        return any(getattr(self, name) is not None for name in self.__class__.model_fields)


class PageQuery(BaseQuery):
    """Query for list endpoints that only accept a page number"""

    page: Optional[int] = Field(None, ge=1)

    def with_page(self, page: int) -> "PageQuery":
        return self._updated(page=page)
