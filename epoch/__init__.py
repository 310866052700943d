from .errors import MalformedLiteralError, MalformedNumericStringError, ParseError
from .seconds import Seconds, from_datetime, now

__all__ = [
    "Seconds",
    "now",
    "from_datetime",
    "ParseError",
    "MalformedLiteralError",
    "MalformedNumericStringError",
]
