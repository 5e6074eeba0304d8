"""Kernel time – Clock port + implementations."""
from gelf_logging.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
