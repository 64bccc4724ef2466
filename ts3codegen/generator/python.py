"""Python code generator for ts3codegen declarations."""

from importlib import resources

from jinja2 import Environment, PackageLoader

from .codecs import CodecKind, gen_parse, gen_serialize, python_type, resolve_codec
from .types import RETURN_CODE, Declarations, Field, Message

RUNTIME_FILES = [
    "__init__.py",
    "errors.py",
    "commands.py",
    "types.py",
    "enums.py",
    "codecs.py",
    "serialization.py",
    "runtime.py",
]

env = Environment(
    loader=PackageLoader("ts3codegen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("python.py.j2")


def _runtime_names(decls: Declarations, kind: CodecKind) -> list[str]:
    """Collect the runtime classes of one codec kind used by the fields."""
    names: set[str] = set()
    for f in decls.fields:
        codec = resolve_codec(f)
        if codec.kind == kind and codec.runtime_name:
            names.add(codec.runtime_name)
    return sorted(names)


def _base_class(message: Message) -> str:
    return "Response" if message.is_response else "Message"


def _field_args(f: Field) -> str:
    """Generate the arguments of message_field()."""
    args = f"{f.wire_name!r}, {f.type.name!r}"
    if f.type.is_list:
        args += ", is_list=True"
    return args


def _notify_entries(decls: Declarations) -> list[tuple[str, Message]]:
    messages = decls.message_map()
    return [(n.variant_name, messages[n.message]) for n in decls.notifies]


def render(
    decls: Declarations,
    runtime_import: str = "ts3_runtime",
) -> str:
    """Render message declarations to Python source code."""
    return template.render(
        decls=decls,
        messages=decls.messages,
        notifies=_notify_entries(decls),
        message_fields=decls.message_fields,
        id_names=_runtime_names(decls, CodecKind.ID),
        enum_names=_runtime_names(decls, CodecKind.ENUM),
        value_names=[
            *_runtime_names(decls, CodecKind.UID),
            *_runtime_names(decls, CodecKind.ICON_HASH),
        ],
        base_class=_base_class,
        python_type=python_type,
        field_args=_field_args,
        gen_parse=lambda f: gen_parse(f, f"cmd.arg({f.wire_name!r})"),
        gen_serialize=lambda f: gen_serialize(f, f"self.{f.generated_name}"),
        return_code=RETURN_CODE,
        literal=repr,
        runtime_import=runtime_import,
    )


def runtime() -> dict[str, str]:
    """Return the Python runtime files as a dict of filename -> content."""
    result: dict[str, str] = {}
    for filename in RUNTIME_FILES:
        content = resources.files("ts3codegen.proto").joinpath(filename).read_text()
        result[filename] = content
    return result
