"""Testing utilities for code that logs through gelf-logging."""
from gelf_logging.testing.fakes import FakeClock, InMemoryTransport

__all__ = ["FakeClock", "InMemoryTransport"]
