"""Build messages."""

from messages.sink import (
    BuildMessage,
    CollectingSink,
    CompilerMessageKind,
    MessageSink,
    Severity,
    StreamSink,
    add_messages,
    report_exception_error,
    to_severity,
)

__all__ = [
    "BuildMessage",
    "CollectingSink",
    "CompilerMessageKind",
    "MessageSink",
    "Severity",
    "StreamSink",
    "add_messages",
    "report_exception_error",
    "to_severity",
]
