"""Message declaration parser using Lark."""

import keyword
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from lark import Lark
from lark.visitors import Transformer

from ts3codegen.proto.enums import PROTOCOL_ENUMS
from ts3codegen.proto.types import ID_TYPES

from .codecs import ValidationError, resolve_codec
from .types import RETURN_CODE, Declarations, Field, FieldType, Message, Notify

__all__ = ["ValidationError", "load", "parse", "validate"]

_g_parser: Lark | None = None

# Members every generated record inherits or defines
RECORD_MEMBERS = frozenset(
    [
        "command_name",
        "from_command",
        "static_args",
        "to_command",
        "into_command",
        "get_return_code",
        "set_return_code",
    ]
)

# Names bound at module level in generated code
MODULE_NAMES = frozenset(
    [
        "ClassVar",
        "Self",
        "StrEnum",
        "dataclass",
        "datetime",
        "timedelta",
        "_c",
        "CanonicalCommand",
        "Message",
        "Response",
        "message_field",
        "Notification",
        "NotificationDispatcher",
        "NotificationKind",
        "Notifications",
        "parse_notification",
        "Uid",
        "IconHash",
        *ID_TYPES,
        *PROTOCOL_ENUMS,
    ]
)

# Builtins used in generated annotations
_ANNOTATION_BUILTINS = frozenset(["bool", "float", "int", "list", "str"])


@dataclass
class _Array:
    pass


@dataclass
class _Annotation:
    value: str


@dataclass
class _Flag:
    value: str


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _find_one(args: list[Any], class_type: type[object]) -> Any:
    filtered = _filter(args, class_type)
    if len(filtered) == 0:
        return None
    if len(filtered) > 1:
        raise RuntimeError(f"Found more than one {class_type}")

    if hasattr(filtered[0], "value"):
        return filtered[0].value
    return filtered[0]


def _unquote(token: Any) -> str:
    return str(token)[1:-1]


class TreeTransformer(Transformer):
    """Transform parse tree into declaration types."""

    def annotation(self, args: list[Any]) -> _Annotation:
        return _Annotation(value=str(args[0]))

    def array(self, args: list[Any]) -> _Array:
        return _Array()

    def field(self, args: list[Any]) -> Field:
        return Field(
            generated_name=str(args[0]),
            wire_name=_unquote(args[1]),
            type=_find_one(args, FieldType),
            original_annotation=_find_one(args, _Annotation),
        )

    def flag(self, args: list[Any]) -> _Flag:
        return _Flag(value=str(args[0]))

    def message(self, args: list[Any]) -> Message:
        flags = [f.value for f in _filter(args, _Flag)]
        return Message(
            record_name=str(args[0]),
            notify_name=_unquote(args[1]),
            params=[str(a) for a in args[2:] if not isinstance(a, _Flag)],
            is_response="response" in flags,
            is_notify="notify" in flags,
        )

    def notify(self, args: list[Any]) -> Notify:
        return Notify(variant_name=str(args[-2]), message=str(args[-1]))

    def start(self, args: list[Any]) -> Declarations:
        return Declarations(
            fields=_filter(args, Field),
            messages=_filter(args, Message),
            notifies=_filter(args, Notify),
        )

    def type(self, args: list[Any]) -> FieldType:
        return FieldType(name=str(args[0]), is_list=_find_one(args, _Array) is not None)


def _check_unique(names: list[str], what: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValidationError(f"{what} {name} declared more than once")
        seen.add(name)


def _check_name(name: str, what: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValidationError(f"{what} name {name} is not a valid Python identifier")


def validate(decls: Declarations) -> None:
    """Validate declarations before code generation."""
    for f in decls.fields:
        _check_name(f.generated_name, "Field")
        if f.generated_name in RECORD_MEMBERS | MODULE_NAMES | _ANNOTATION_BUILTINS:
            raise ValidationError(f"Field name {f.generated_name} is reserved")
    for msg in decls.messages:
        _check_name(msg.record_name, "Message")
        if msg.record_name in MODULE_NAMES:
            raise ValidationError(f"Message name {msg.record_name} is reserved")
    for notify in decls.notifies:
        _check_name(notify.variant_name, "Notification")
        if notify.variant_name.startswith("_"):
            raise ValidationError(f"Notification name {notify.variant_name} is reserved")

    _check_unique([f.generated_name for f in decls.fields], "Field")
    _check_unique([m.record_name for m in decls.messages], "Message")
    _check_unique([n.variant_name for n in decls.notifies], "Notification")

    # Codecs must resolve for every field, used or not
    for f in decls.fields:
        resolve_codec(f)

    field_map = decls.field_map()
    for msg in decls.messages:
        for param in msg.params:
            if param not in field_map:
                raise ValidationError(
                    f"{msg.record_name} references {param}, but it is not declared"
                )
        _check_unique(msg.params, f"{msg.record_name} parameter")
        if msg.is_response and RETURN_CODE in msg.params:
            raise ValidationError(
                f"{msg.record_name} declares {RETURN_CODE}, which responses reserve"
            )

    message_map = decls.message_map()
    dispatch_keys: dict[str, str] = {}
    for notify in decls.notifies:
        if notify.message not in message_map:
            raise ValidationError(
                f"{notify.variant_name} carries {notify.message}, but it is not declared"
            )

        key = message_map[notify.message].notify_name
        if key in dispatch_keys:
            raise ValidationError(
                f"Notification name {key} used by both "
                f"{dispatch_keys[key]} and {notify.variant_name}"
            )
        dispatch_keys[key] = notify.variant_name


def parse(text: str) -> Declarations:
    """Parse a message declaration file."""
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/declarations.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    tree = _g_parser.parse(text)
    decls = TreeTransformer().transform(tree)

    validate(decls)

    return decls


def load(path: str | Path) -> Declarations:
    """Load declarations from a text declaration file or a JSON export."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        decls = Declarations.from_json(text)
        validate(decls)
        return decls

    return parse(text)
