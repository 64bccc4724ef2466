"""Type definitions for message declarations and code generation."""

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin


@dataclass
class FieldType(DataClassJsonMixin):
    """Represents the semantic type of a field.

    For sequences:
    - is_list=True: the wire value holds several values of ``name``
    """

    name: str
    is_list: bool = False


@dataclass
class Field(DataClassJsonMixin):
    """Represents a field that messages can reference.

    ``original_annotation`` picks between encodings of the same semantic
    type, such as a duration sent in seconds or in milliseconds.
    """

    wire_name: str
    generated_name: str
    type: FieldType
    original_annotation: str | None = None


@dataclass
class Message(DataClassJsonMixin):
    """Represents a message definition.

    ``params`` holds the generated names of the referenced fields, in wire
    order.
    """

    record_name: str
    notify_name: str
    params: list[str] = field(default_factory=list)
    is_response: bool = False
    is_notify: bool = False


@dataclass
class Notify(DataClassJsonMixin):
    """Represents a notification variant and the message it carries."""

    variant_name: str
    message: str


@dataclass
class Declarations(DataClassJsonMixin):
    """Represents a complete set of field, message and notify declarations."""

    fields: list[Field] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    notifies: list[Notify] = field(default_factory=list)

    def field_map(self) -> dict[str, Field]:
        return {f.generated_name: f for f in self.fields}

    def message_map(self) -> dict[str, Message]:
        return {m.record_name: m for m in self.messages}

    def message_fields(self, message: Message) -> list[Field]:
        """Resolve the declared params of ``message`` in order."""
        fields = self.field_map()
        return [fields[name] for name in message.params]


RETURN_CODE = "return_code"
