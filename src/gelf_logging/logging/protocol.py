"""Logging – transport port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from gelf_logging.assembly.message import GelfMessage


@runtime_checkable
class GelfTransport(Protocol):
    """Port: deliver an assembled message to a GELF endpoint (UDP, TCP, HTTP…)."""

    def send(self, message: GelfMessage) -> None: ...


__all__ = ["GelfTransport"]
