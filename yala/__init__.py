"""Tiny structured logging facade with pluggable adapters and middleware."""

__version__ = "1.0.0"

__all__ = [
    "console",
    "entry",
    "global_",
    "logadapter",
    "logfmt",
    "logger",
    "middleware",
    "noop",
    "printer",
]