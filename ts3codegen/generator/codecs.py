"""Resolution of field semantic types to their runtime codecs."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import assert_never

from ts3codegen.proto.enums import PROTOCOL_ENUMS
from ts3codegen.proto.types import ID_TYPES

from .types import Field


class ValidationError(RuntimeError):
    """Raised when declaration validation fails."""


class CodecKind(StrEnum):
    """Categories of semantic types, each with its own wire rule."""

    INTEGER = auto()
    FLOAT = auto()
    BOOL = auto()
    STRING = auto()
    UID = auto()
    ICON_HASH = auto()
    ID = auto()
    ENUM = auto()
    DURATION = auto()
    DATETIME = auto()


INTEGER_TYPES = frozenset(["u8", "u16", "u32", "u64", "i8", "i16", "i32", "i64"])
FLOAT_TYPES = frozenset(["f32", "f64"])

# Annotations that select the wire unit of a Duration field
DURATION_SECONDS = "TimeSpanSecondsT"
DURATION_MILLIS = "TimeSpanMillisecT"

_SINGLE_TYPES = {
    "bool": CodecKind.BOOL,
    "str": CodecKind.STRING,
    "UidT": CodecKind.UID,
    "IconHash": CodecKind.ICON_HASH,
    "Duration": CodecKind.DURATION,
    "DateTime": CodecKind.DATETIME,
}


@dataclass(frozen=True)
class Codec:
    """How one field is read from and written to the wire.

    ``parse`` and ``serialize`` name runtime callables; ``parse_args`` are
    extra source expressions passed to ``parse`` after the raw text.
    """

    kind: CodecKind
    python_type: str
    parse: str
    serialize: str
    parse_args: tuple[str, ...] = ()
    runtime_name: str | None = None


def semantic_types() -> list[str]:
    """Return every semantic type name a field may use."""
    return sorted([*INTEGER_TYPES, *FLOAT_TYPES, *_SINGLE_TYPES, *ID_TYPES, *PROTOCOL_ENUMS])


def codec_kind(type_name: str) -> CodecKind:
    """Classify a semantic type name."""
    if type_name in INTEGER_TYPES:
        return CodecKind.INTEGER
    if type_name in FLOAT_TYPES:
        return CodecKind.FLOAT
    if type_name in ID_TYPES:
        return CodecKind.ID
    if type_name in PROTOCOL_ENUMS:
        return CodecKind.ENUM
    if type_name in _SINGLE_TYPES:
        return _SINGLE_TYPES[type_name]
    raise ValidationError(f"Unknown type {type_name}")


def resolve_codec(f: Field) -> Codec:
    """Pick the codec for a field.

    Raises:
        ValidationError: The type is unknown, or a Duration field carries no
            recognized unit annotation.
    """
    name = f.type.name
    kind = codec_kind(name)

    match kind:
        case CodecKind.INTEGER:
            return Codec(kind, "int", "_c.parse_integer", "_c.serialize_integer", (repr(name),))
        case CodecKind.FLOAT:
            return Codec(kind, "float", "_c.parse_float", "_c.serialize_float")
        case CodecKind.BOOL:
            return Codec(kind, "bool", "_c.parse_bool", "_c.serialize_bool")
        case CodecKind.STRING:
            return Codec(kind, "str", "_c.parse_str", "_c.serialize_str")
        case CodecKind.UID:
            return Codec(kind, "Uid", "_c.parse_uid", "_c.serialize_uid", runtime_name="Uid")
        case CodecKind.ICON_HASH:
            return Codec(
                kind,
                "IconHash",
                "_c.parse_icon_hash",
                "_c.serialize_icon_hash",
                runtime_name="IconHash",
            )
        case CodecKind.ID:
            return Codec(kind, name, "_c.parse_id", "_c.serialize_id", (name,), runtime_name=name)
        case CodecKind.ENUM:
            return Codec(
                kind, name, "_c.parse_enum", "_c.serialize_enum", (name,), runtime_name=name
            )
        case CodecKind.DURATION:
            if f.original_annotation == DURATION_SECONDS:
                return Codec(
                    kind, "timedelta", "_c.parse_duration_seconds", "_c.serialize_duration_seconds"
                )
            if f.original_annotation == DURATION_MILLIS:
                return Codec(
                    kind, "timedelta", "_c.parse_duration_millis", "_c.serialize_duration_millis"
                )
            raise ValidationError(
                f"Duration field {f.generated_name} needs {DURATION_SECONDS} or {DURATION_MILLIS}"
            )
        case CodecKind.DATETIME:
            return Codec(kind, "datetime", "_c.parse_datetime", "_c.serialize_datetime")
        case _:
            assert_never(kind)


def python_type(f: Field) -> str:
    """Map a field to its Python type annotation."""
    type_name = resolve_codec(f).python_type
    if f.type.is_list:
        return f"list[{type_name}]"
    return type_name


def gen_parse(f: Field, raw: str) -> str:
    """Generate the expression that parses ``raw`` for a field."""
    codec = resolve_codec(f)
    args = "".join(f", {arg}" for arg in codec.parse_args)
    if f.type.is_list:
        return f"_c.parse_list({raw}, {codec.parse}{args})"
    return f"{codec.parse}({raw}{args})"


def gen_serialize(f: Field, value: str) -> str:
    """Generate the expression that serializes ``value`` for a field."""
    codec = resolve_codec(f)
    if f.type.is_list:
        if codec.kind == CodecKind.STRING:
            return f"_c.serialize_str_list({value})"
        return f"_c.serialize_list({value}, {codec.serialize})"
    return f"{codec.serialize}({value})"
