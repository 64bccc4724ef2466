"""ts3codegen message code generator."""

from .codecs import Codec as Codec
from .codecs import CodecKind as CodecKind
from .codecs import resolve_codec as resolve_codec
from .parser import *
from .types import *
