"""Parsing helpers shared by the Seconds decoders.

Both wire forms carry a signed 64-bit integer: JSON as a bare numeric
literal, DynamoDB as the decimal string in an attribute value's ``N`` field.
"""

import json
import re
from collections.abc import Mapping
from typing import Any

from epoch.errors import MalformedLiteralError, MalformedNumericStringError
from epoch.util import INT64_MAX, INT64_MIN, in_int64

# DynamoDB number type key in a low-level attribute value
NUMBER_KEY = "N"

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def parse_json_literal(data: str | bytes | bytearray) -> int | None:
    """Parse a JSON document holding a single integer literal.

    Returns None when the document is the ``null`` literal.

    Raises:
        MalformedLiteralError: If the document is not valid JSON, holds a
            non-integer value, or the integer does not fit in 64 bits
    """
    try:
        value = json.loads(data)
    # JSONDecodeError, UnicodeDecodeError and the int digit limit
    except ValueError as exc:
        raise MalformedLiteralError(
            f"Invalid JSON literal for Seconds: {data!r}\n" f"Reason: {exc}",
            data=data,
        ) from exc

    if value is None:
        return None

    # bool is an int subclass; JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedLiteralError(
            f"Seconds must be a JSON integer literal.\n"
            f"Got {type(value).__name__!r}: {data!r}\n"
            f"Hint: encode as a bare number, e.g. 1700000000",
            data=data,
        )

    if not in_int64(value):
        raise MalformedLiteralError(
            f"JSON integer {value} is outside the int64 range "
            f"[{INT64_MIN}, {INT64_MAX}]",
            data=data,
        )
    return value


def parse_numeric_string(text: Any) -> int:
    """Parse a base-10 signed 64-bit integer string.

    Accepts an optional sign followed by ASCII digits only. Whitespace,
    underscores, decimal points and exponents are rejected.

    Raises:
        MalformedNumericStringError: If ``text`` is not such a string or is
            out of range
    """
    if not isinstance(text, str) or not _DECIMAL_INT.fullmatch(text):
        raise MalformedNumericStringError(
            f"Attribute value {NUMBER_KEY!r} field is not a base-10 integer: "
            f"{text!r}",
            data=text,
        )

    value = int(text)
    if not in_int64(value):
        raise MalformedNumericStringError(
            f"Attribute value {NUMBER_KEY!r} field {text!r} is outside the "
            f"int64 range [{INT64_MIN}, {INT64_MAX}]",
            data=text,
        )
    return value


def numeric_field(av: Mapping[str, Any] | None) -> Any | None:
    """Return the ``N`` field of an attribute value, or None if unset."""
    if av is None:
        return None
    return av.get(NUMBER_KEY)
