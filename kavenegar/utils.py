# Helpers for turning Python values into Kavenegar form fields.

from enum import Enum
from typing import Any


def wire_value(value: Any) -> Any:
    """Unwrap enum members and map booleans to 1/0; everything else is unchanged."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


def parse_input(value: Any) -> Any:
    """Join a list of IDs with commas; scalars pass through."""
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(wire_value(v)) for v in value)
    return wire_value(value)


def as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def mask_api_key(url: str, api_key: str) -> str:
    # Keep the last four characters so log lines can still be told apart.
    if not api_key:
        return url
    return url.replace(api_key, "***" + api_key[-4:])
