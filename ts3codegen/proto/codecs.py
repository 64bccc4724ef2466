"""Conversions between wire text and typed message values.

Each semantic type has a ``parse_*`` function taking the raw argument text and
a ``serialize_*`` function returning wire text. Parsers raise
ParameterConvert on malformed input.
"""

import re
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

from .enums import ProtocolEnum
from .errors import ParameterConvert
from .types import IconHash, IntId, Uid

T = TypeVar("T")
TEnum = TypeVar("TEnum", bound=ProtocolEnum)
TId = TypeVar("TId", bound=IntId)

# Inclusive bounds of each integer wire type
INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "u8": (0, 2**8 - 1),
    "u16": (0, 2**16 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
    "i8": (-(2**7), 2**7 - 1),
    "i16": (-(2**15), 2**15 - 1),
    "i32": (-(2**31), 2**31 - 1),
    "i64": (-(2**63), 2**63 - 1),
}

_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(inf|infinity|nan|([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-]?[0-9]+)?)", re.ASCII | re.IGNORECASE
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)


def parse_integer(raw: str, wire_type: str) -> int:
    """Parse decimal text into an integer of the given wire type."""
    low, high = INTEGER_RANGES[wire_type]
    pattern = _SIGNED_RE if low < 0 else _UNSIGNED_RE
    if not pattern.fullmatch(raw):
        raise ParameterConvert(f"{raw!r} is not a valid {wire_type}")
    value = int(raw)
    if not low <= value <= high:
        raise ParameterConvert(f"{raw} is out of range for {wire_type}")
    return value


def serialize_integer(value: int) -> str:
    return str(value)


def parse_float(raw: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise ParameterConvert(f"{raw!r} is not a valid float")
    return float(raw)


def serialize_float(value: float) -> str:
    """Format a float, writing integral values without a fraction."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def parse_bool(raw: str) -> bool:
    if raw == "0":
        return False
    if raw == "1":
        return True
    raise ParameterConvert(f"{raw!r} is not a valid bool")


def serialize_bool(value: bool) -> str:
    return "1" if value else "0"


def parse_str(raw: str) -> str:
    return raw


def serialize_str(value: str) -> str:
    return value


def parse_uid(raw: str) -> Uid:
    return Uid(raw)


def serialize_uid(value: Uid) -> str:
    return value.value


def parse_icon_hash(raw: str) -> IconHash:
    """Parse an icon id sent as u64 and keep its low 32 bits as a signed value.

    The narrowing is a plain bit truncation, so "4294967296" becomes 0.
    """
    bits = parse_integer(raw, "u64") & 0xFFFF_FFFF
    if bits >= 1 << 31:
        bits -= 1 << 32
    return IconHash(bits)


def serialize_icon_hash(value: IconHash) -> str:
    """Write the sign-extended 64-bit pattern of the icon id as unsigned text."""
    return str(value.value & 0xFFFF_FFFF_FFFF_FFFF)


def parse_id(raw: str, id_type: type[TId]) -> TId:
    return id_type(parse_integer(raw, id_type.wire_type))


def serialize_id(value: IntId) -> str:
    return str(value.value)


def parse_enum(raw: str, enum_type: type[TEnum]) -> TEnum:
    code = parse_integer(raw, "u32")
    try:
        return enum_type(code)
    except ValueError:
        raise ParameterConvert(f"{code} is not a valid {enum_type.__name__}") from None


def serialize_enum(value: ProtocolEnum) -> str:
    return str(int(value))


def parse_duration_seconds(raw: str) -> timedelta:
    """Parse a duration sent as whole seconds.

    The value must still fit an i64 once scaled to milliseconds.
    """
    seconds = parse_integer(raw, "i64")
    low, high = INTEGER_RANGES["i64"]
    if not low <= seconds * 1000 <= high:
        raise ParameterConvert(f"{raw} seconds overflows a millisecond duration")
    return _to_timedelta(seconds=seconds)


def serialize_duration_seconds(value: timedelta) -> str:
    return str(_whole_units(value, _SECOND))


def parse_duration_millis(raw: str) -> timedelta:
    return _to_timedelta(milliseconds=parse_integer(raw, "i64"))


def serialize_duration_millis(value: timedelta) -> str:
    return str(_whole_units(value, _MILLISECOND))


def _whole_units(value: timedelta, unit: timedelta) -> int:
    """Count whole units in a duration, truncating toward zero."""
    count, rest = divmod(value, unit)
    if count < 0 and rest:
        count += 1
    return count


def _to_timedelta(**kwargs: int) -> timedelta:
    try:
        return timedelta(**kwargs)
    except OverflowError:
        raise ParameterConvert(f"duration {kwargs} is out of range") from None


def parse_datetime(raw: str) -> datetime:
    """Parse a UTC timestamp sent as seconds since the Unix epoch."""
    seconds = parse_integer(raw, "i64")
    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        raise ParameterConvert(f"timestamp {seconds} is out of range") from None


def serialize_datetime(value: datetime) -> str:
    return str((value - _EPOCH) // _SECOND)


# NOTE: sequences are split on a space but joined with a comma. Outgoing
# commands must keep the comma.
def parse_list(raw: str, parse: Callable[..., T], *args: Any) -> list[T]:
    """Parse a space separated sequence, failing on the first bad token."""
    return [parse(token, *args) for token in raw.split(" ")]


def serialize_list(values: Iterable[T], serialize: Callable[[T], str]) -> str:
    return ",".join(serialize(value) for value in values)


def serialize_str_list(values: Iterable[str]) -> str:
    """Join strings with a comma, leaving out empty ones."""
    return ",".join(value for value in values if value)
