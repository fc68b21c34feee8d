"""Build message boundary shared by code built around the resolver.

Builders report diagnostics as ``BuildMessage`` values handed to a
``MessageSink`` supplied by the surrounding build system. The resolver itself
never reports anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CompilerMessageKind(str, Enum):
    """Message kinds produced by external compiler tools."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    STATISTICS = "statistics"


@dataclass(frozen=True)
class BuildMessage:
    builder_name: str
    severity: Severity
    text: str
    source_path: str | None = None

    def format(self) -> str:
        if self.source_path is None:
            return f"{self.severity.value}: {self.text}"
        return f"{self.severity.value}: {self.source_path}: {self.text}"


class MessageSink(Protocol):
    def process_message(self, message: BuildMessage) -> None: ...


@dataclass
class CollectingSink:
    """Sink that keeps every message in memory."""

    messages: list[BuildMessage] = field(default_factory=list)

    def process_message(self, message: BuildMessage) -> None:
        self.messages.append(message)

    def by_severity(self, severity: Severity) -> list[BuildMessage]:
        return [m for m in self.messages if m.severity is severity]


class StreamSink:
    """Sink that writes one formatted line per message to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def process_message(self, message: BuildMessage) -> None:
        self._stream.write(message.format() + "\n")


_SEVERITY_BY_KIND = {
    CompilerMessageKind.ERROR: Severity.ERROR,
    CompilerMessageKind.WARNING: Severity.WARNING,
    CompilerMessageKind.INFORMATION: Severity.INFO,
}


def to_severity(kind: CompilerMessageKind) -> Severity | None:
    """Map a compiler message kind to a build severity.

    Kinds without a build counterpart map to None and are logged as errors.
    """
    severity = _SEVERITY_BY_KIND.get(kind)
    if severity is None:
        logger.error("unknown compiler message kind %r", kind)
    return severity


def add_messages(
    sink: MessageSink,
    messages: Mapping[CompilerMessageKind, Sequence[str]],
    source_path: str | None,
    builder_name: str,
) -> None:
    """Forward grouped compiler messages to the sink."""
    for kind, texts in messages.items():
        severity = to_severity(kind)
        if severity is None:
            continue

        for text in texts:
            sink.process_message(
                BuildMessage(builder_name, severity, text, source_path)
            )


def report_exception_error(
    sink: MessageSink,
    file_path: str | None,
    exception: BaseException,
    builder_name: str,
) -> None:
    """Report an exception as an error message."""
    text = str(exception)
    if text:
        sink.process_message(
            BuildMessage(builder_name, Severity.ERROR, text, file_path)
        )
        logger.debug("%s failed", builder_name, exc_info=exception)
    else:
        sink.process_message(
            BuildMessage(
                builder_name,
                Severity.ERROR,
                f"{builder_name}: {type(exception).__name__}",
                file_path,
            )
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
