"""Tests for declaration parser."""

import os

import pytest

from ts3codegen.generator import load, parse, validate
from ts3codegen.generator.parser import ValidationError
from ts3codegen.generator.types import Declarations, Field, FieldType, Message, Notify

FILE_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))


def describe_parse_field():
    def parses_simple_field(expect):
        decls = parse('field client_id = "clid": ClientId')
        expect(len(decls.fields)) == 1
        expect(decls.fields[0].generated_name) == "client_id"
        expect(decls.fields[0].wire_name) == "clid"
        expect(decls.fields[0].type) == FieldType(name="ClientId", is_list=False)
        expect(decls.fields[0].original_annotation) == None

    def parses_list_field(expect):
        decls = parse('field client_ids = "clid": ClientId[]')
        expect(decls.fields[0].type) == FieldType(name="ClientId", is_list=True)

    def parses_annotation(expect):
        decls = parse(
            """
            field delay = "channel_delete_delay": Duration as TimeSpanSecondsT
            field idle = "client_idle_time": Duration as TimeSpanMillisecT
        """
        )
        expect(decls.fields[0].original_annotation) == "TimeSpanSecondsT"
        expect(decls.fields[1].original_annotation) == "TimeSpanMillisecT"

    def parses_all_scalar_types(expect):
        decls = parse(
            """
            field a = "a": u8
            field b = "b": u16
            field c = "c": u32
            field d = "d": u64
            field e = "e": i8
            field f = "f": i16
            field g = "g": i32
            field h = "h": i64
            field i = "i": f32
            field j = "j": f64
            field k = "k": bool
            field l = "l": str
            field m = "m": UidT
            field n = "n": IconHash
            field o = "o": DateTime
        """
        )
        expect([f.type.name for f in decls.fields]) == [
            "u8", "u16", "u32", "u64", "i8", "i16", "i32", "i64",
            "f32", "f64", "bool", "str", "UidT", "IconHash", "DateTime",
        ]

    def ignores_comments(expect):
        decls = parse(
            """
            # Header comment
            field name = "client_nickname": str  # trailing
        """
        )
        expect(len(decls.fields)) == 1


def describe_parse_message():
    def parses_params_in_order(expect):
        decls = parse(
            """
            field client_id = "clid": ClientId
            field channel_id = "cid": ChannelId
            message ClientMoved "notifyclientmoved" notify { channel_id client_id }
        """
        )
        expect(decls.messages) == [
            Message(
                record_name="ClientMoved",
                notify_name="notifyclientmoved",
                params=["channel_id", "client_id"],
                is_response=False,
                is_notify=True,
            )
        ]

    def parses_flags(expect):
        decls = parse(
            """
            message A "a" { }
            message B "b" response { }
            message C "c" response notify { }
        """
        )
        expect([(m.is_response, m.is_notify) for m in decls.messages]) == [
            (False, False),
            (True, False),
            (True, True),
        ]

    def parses_notify(expect):
        decls = parse(
            """
            message CommandError "error" response notify { }
            notify Error: CommandError
        """
        )
        expect(decls.notifies) == [Notify(variant_name="Error", message="CommandError")]

    def resolves_message_fields(expect):
        decls = parse(
            """
            field client_id = "clid": ClientId
            field channel_id = "cid": ChannelId
            message ClientMove "clientmove" response { client_id channel_id }
        """
        )
        fields = decls.message_fields(decls.messages[0])
        expect([f.wire_name for f in fields]) == ["clid", "cid"]

    def parses_fixture(expect):
        decls = load(FILE_DIR + "/messages.tsdecl")
        expect(len(decls.messages)) == 9
        expect(len(decls.notifies)) == 8
        expect(decls.message_map()["CommandError"].is_response) == True


def describe_validation():
    def rejects_unresolved_field(expect):
        with pytest.raises(ValidationError) as exinfo:
            parse('message A "a" { missing }')

        expect(str(exinfo.value)).includes("A references missing, but it is not declared")

    def rejects_unknown_type(expect):
        with pytest.raises(ValidationError) as exinfo:
            parse('field a = "a": Color')

        expect(str(exinfo.value)).includes("Unknown type Color")

    def rejects_duration_without_unit(expect):
        with pytest.raises(ValidationError) as exinfo:
            parse('field delay = "delay": Duration')

        expect(str(exinfo.value)).includes("TimeSpanSecondsT")

    def rejects_duration_with_unknown_unit(expect):
        with pytest.raises(ValidationError):
            parse('field delay = "delay": Duration as TimeSpanHoursT')

    def rejects_duplicate_dispatch_name(expect):
        code = """
            message A "notifysame" notify { }
            message B "notifysame" notify { }
            notify First: A
            notify Second: B
        """
        with pytest.raises(ValidationError) as exinfo:
            parse(code)

        expect(str(exinfo.value)).includes("notifysame used by both First and Second")

    def allows_shared_name_without_notify(expect):
        decls = parse(
            """
            message A "same" { }
            message B "same" response { }
        """
        )
        expect(len(decls.messages)) == 2

    def rejects_undeclared_notify_message(expect):
        with pytest.raises(ValidationError) as exinfo:
            parse("notify Error: CommandError")

        expect(str(exinfo.value)).includes("Error carries CommandError, but it is not declared")

    def rejects_duplicate_field(expect):
        with pytest.raises(ValidationError):
            parse(
                """
                field a = "a": u8
                field a = "b": u16
            """
            )

    def rejects_duplicate_variant(expect):
        with pytest.raises(ValidationError):
            parse(
                """
                message A "a" notify { }
                message B "b" notify { }
                notify V: A
                notify V: B
            """
            )

    def rejects_return_code_field_on_response(expect):
        with pytest.raises(ValidationError):
            parse(
                """
                field return_code = "return_code": str
                message A "a" response { return_code }
            """
            )

    def rejects_keyword_field_name(expect):
        with pytest.raises(ValidationError):
            parse('field class = "class": u8')

    def rejects_record_member_field_names(expect):
        for name in ["command_name", "from_command", "static_args", "to_command", "into_command"]:
            with pytest.raises(ValidationError) as exinfo:
                parse(f'field {name} = "cn": str\nmessage M "mycmd" {{ {name} }}')

            expect(str(exinfo.value)).includes(f"Field name {name} is reserved")

    def rejects_generated_module_field_names(expect):
        with pytest.raises(ValidationError):
            parse('field message_field = "mf": str')

    def rejects_message_named_after_runtime_type(expect):
        for name in ["Codec", "ClientId", "Uid", "Response", "Notifications", "dataclass"]:
            with pytest.raises(ValidationError) as exinfo:
                parse(f'field a = "a": Codec\nmessage {name} "codec" {{ a }}')

            expect(str(exinfo.value)).includes(f"Message name {name} is reserved")

    def rejects_keyword_message_and_variant_names(expect):
        with pytest.raises(ValidationError):
            parse('message class "c" { }')
        with pytest.raises(ValidationError):
            parse('message A "a" notify { }\nnotify None: A')

    def rejects_invalid_identifiers_from_json(expect):
        decls = Declarations(
            fields=[Field(wire_name="a", generated_name="a-b", type=FieldType(name="u8"))]
        )

        with pytest.raises(ValidationError) as exinfo:
            validate(decls)

        expect(str(exinfo.value)).includes("not a valid Python identifier")


def describe_json():
    def round_trips_through_json(expect):
        decls = Declarations(
            fields=[
                Field(
                    wire_name="channel_delete_delay",
                    generated_name="delay",
                    type=FieldType(name="Duration"),
                    original_annotation="TimeSpanSecondsT",
                )
            ],
            messages=[Message(record_name="A", notify_name="a", params=["delay"], is_notify=True)],
            notifies=[Notify(variant_name="A", message="A")],
        )
        expect(Declarations.from_json(decls.to_json())) == decls

    def loads_json_file(expect, tmp_path):
        decls = load(FILE_DIR + "/messages.tsdecl")
        path = tmp_path / "messages.json"
        path.write_text(decls.to_json())

        expect(load(path)) == decls

    def validates_json_file(expect, tmp_path):
        decls = Declarations(messages=[Message(record_name="A", notify_name="a", params=["x"])])
        path = tmp_path / "broken.json"
        path.write_text(decls.to_json())

        with pytest.raises(ValidationError):
            load(path)
