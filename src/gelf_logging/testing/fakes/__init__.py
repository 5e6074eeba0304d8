"""Testing fakes – in-memory doubles for transports and time."""
from gelf_logging.testing.fakes.clock import FakeClock
from gelf_logging.testing.fakes.transport import InMemoryTransport

__all__ = ["FakeClock", "InMemoryTransport"]
