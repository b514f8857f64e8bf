"""Diagnostics sinks for non-fatal markup warnings."""

import logging
from typing import Iterator, Optional, Protocol

from tag_text.log import get_logger


class DiagnosticsSink(Protocol):
    """Receives human-readable warnings. Must never raise."""

    def warn(self, message: str) -> None:
        ...


class DiagnosticCollector:
    """Collect diagnostics into a list."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages = []

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __bool__(self) -> bool:
        return bool(self.messages)


class LoggingDiagnostics:
    """Forward diagnostics to a logger at WARNING level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger(__name__)

    def warn(self, message: str) -> None:
        self.logger.warning(message)
