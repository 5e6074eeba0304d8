"""Shared test fixtures for all test modules."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from gelf_logging.assembly import GelfLoggerOptions, LogLevel
from gelf_logging.logging import GelfLoggerProvider
from gelf_logging.testing import FakeClock, InMemoryTransport


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def options() -> GelfLoggerOptions:
    """Options shared by a test; edit before building a provider."""
    return GelfLoggerOptions(log_source="unit-tests", log_level=LogLevel.TRACE)


@pytest.fixture
def make_provider(
    transport: InMemoryTransport, options: GelfLoggerOptions
) -> Iterator[Callable[..., GelfLoggerProvider]]:
    """Factory fixture: ``make_provider(**overrides)`` builds a provider on *options*."""
    providers: list[GelfLoggerProvider] = []

    def _make(**overrides: Any) -> GelfLoggerProvider:
        for key, value in overrides.items():
            setattr(options, key, value)
        provider = GelfLoggerProvider(options, transport, clock=FakeClock())
        providers.append(provider)
        return provider

    yield _make
    for provider in providers:
        provider.close()
