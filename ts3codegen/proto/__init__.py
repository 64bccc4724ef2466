"""Runtime support for generated ts3codegen messages."""
