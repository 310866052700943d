"""Whole seconds since the Unix epoch.

``Seconds`` is an ``int`` subclass, so it hashes, compares and sorts like
the plain integer it wraps. Arithmetic on it yields a plain ``int``; use
``add`` to stay in the type.

Example:
    >>> from datetime import timedelta, timezone
    >>> s = Seconds(123)
    >>> s.add(timedelta(milliseconds=1500))
    Seconds(124)
    >>> s.to_json()
    '123'
    >>> s.to_attribute_value()
    {'N': '123'}
    >>> s.to_datetime(timezone.utc).isoformat()
    '1970-01-01T00:02:03+00:00'
"""

import logging
import operator
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, SupportsIndex
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema
from typing_extensions import Self, override

from epoch.codecs import (
    NUMBER_KEY,
    numeric_field,
    parse_json_literal,
    parse_numeric_string,
)
from epoch.errors import MalformedLiteralError
from epoch.util import (
    DAY,
    EPOCH,
    INT64_MAX,
    INT64_MIN,
    MICROSECONDS_PER_SECOND,
    ONE_MICROSECOND,
    in_int64,
)

logger = logging.getLogger(__name__)


def _resolve_zone(tz: tzinfo | str | None) -> tzinfo | None:
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


class Seconds(int):
    """Seconds elapsed since 1970-01-01T00:00:00Z (negative before it)."""

    __slots__ = ()

    def __new__(cls, value: SupportsIndex = 0) -> Self:
        number = operator.index(value)
        if not in_int64(number):
            raise OverflowError(
                f"Seconds value {number} is outside the int64 range "
                f"[{INT64_MIN}, {INT64_MAX}]"
            )
        return super().__new__(cls, number)

    @override
    def __repr__(self) -> str:
        return f"Seconds({int(self)})"

    @override
    def __str__(self) -> str:
        return int.__repr__(self)

    # -- construction ---------------------------------------------------

    @classmethod
    def now(cls) -> Self:
        """Current wall-clock time, sub-second part dropped."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        """Whole seconds between the epoch and a timezone-aware datetime.

        The microsecond component is dropped, so the result names the
        second shown in the datetime's own calendar fields.

        Raises:
            TypeError: If ``dt`` is naive
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise TypeError(
                f"Seconds.from_datetime requires a timezone-aware datetime.\n"
                f"Got naive datetime: {dt!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        delta = dt - EPOCH
        return cls(delta.days * DAY + delta.seconds)

    @classmethod
    def from_isoformat(cls, text: str) -> Self:
        """Parse an ISO-8601 timestamp carrying a UTC offset.

        Raises:
            ValueError: If ``text`` is not ISO-8601
            TypeError: If ``text`` has no offset
        """
        return cls.from_datetime(isoparse(text))

    # -- arithmetic and projections -------------------------------------

    def add(self, duration: timedelta) -> Self:
        """Return this instant shifted by ``duration``.

        The duration is cut to whole seconds toward zero, so both
        ``timedelta(seconds=1)`` and ``timedelta(milliseconds=1500)`` add one.
        """
        micros = duration // ONE_MICROSECOND
        whole = abs(micros) // MICROSECONDS_PER_SECOND
        return type(self)(int(self) + (whole if micros >= 0 else -whole))

    def to_int(self) -> int:
        return int(self)

    def to_datetime(self, tz: tzinfo | str | None = None) -> datetime:
        """Calendar time for this instant in ``tz``.

        Args:
            tz: A tzinfo, an IANA timezone name (e.g. "US/Pacific"), or None
                for the process's local timezone

        Raises:
            OverflowError: If the instant falls outside the years 1-9999
                that ``datetime`` can represent
        """
        zone = _resolve_zone(tz)
        try:
            return (EPOCH + timedelta(seconds=int(self))).astimezone(zone)
        except OverflowError as exc:
            raise OverflowError(
                f"{self!r} is outside the range datetime can represent "
                f"(years 1-9999)"
            ) from exc

    # -- JSON ------------------------------------------------------------

    def to_json(self) -> str:
        """Bare decimal JSON literal, e.g. ``123``."""
        return int.__repr__(self)

    def decode_json(self, data: str | bytes | bytearray) -> Self:
        """Decode a JSON integer literal.

        A ``null`` literal leaves the value as it is: ``self`` is returned.

        Raises:
            MalformedLiteralError: If ``data`` is not an int64 JSON literal
        """
        value = parse_json_literal(data)
        if value is None:
            logger.debug("JSON null for Seconds; keeping %d", self)
            return self
        return type(self)(value)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> Self:
        """Decode ``data`` into a fresh value (zero for ``null``)."""
        return cls().decode_json(data)

    # -- DynamoDB attribute values ---------------------------------------

    def to_attribute_value(self) -> dict[str, str]:
        """Low-level DynamoDB attribute value, e.g. ``{"N": "123"}``."""
        return {NUMBER_KEY: int.__repr__(self)}

    def decode_attribute_value(self, av: Mapping[str, Any] | None) -> Self:
        """Decode a low-level DynamoDB attribute value.

        A missing record, or one without an ``N`` field, leaves the value as
        it is: ``self`` is returned.

        Raises:
            MalformedNumericStringError: If ``N`` is not a base-10 int64
        """
        text = numeric_field(av)
        if text is None:
            logger.debug("No %r attribute for Seconds; keeping %d", NUMBER_KEY, self)
            return self
        return type(self)(parse_numeric_string(text))

    @classmethod
    def from_attribute_value(cls, av: Mapping[str, Any] | None) -> Self:
        """Decode ``av`` into a fresh value (zero when unset)."""
        return cls().decode_attribute_value(av)

    # -- pydantic --------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, return_schema=core_schema.int_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "integer", "format": "int64"}

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if value is None:
            raise PydanticCustomError(
                "seconds_null",
                "Seconds field does not accept null; "
                "declare it as `Seconds | None` to allow null",
            )
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedLiteralError(
                f"Seconds must be an integer, got {type(value).__name__!r}: "
                f"{value!r}",
                data=value,
            )
        if not in_int64(value):
            raise MalformedLiteralError(
                f"Integer {value} is outside the int64 range "
                f"[{INT64_MIN}, {INT64_MAX}]",
                data=value,
            )
        return cls(value)


def now() -> Seconds:
    """Current time expressed as Seconds."""
    return Seconds.now()


def from_datetime(dt: datetime) -> Seconds:
    """Epoch seconds of a timezone-aware datetime."""
    return Seconds.from_datetime(dt)
