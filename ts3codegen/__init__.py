"""ts3codegen - Message code generator for TeamSpeak style command protocols."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ts3codegen")
except PackageNotFoundError:
    __version__ = "(local)"
