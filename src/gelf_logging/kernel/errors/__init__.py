"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── GelfError
        └── ContractViolationError      (contract.py)
            ├── UnknownLogLevelError
            ├── TemplateError
            └── InvalidFieldNameError

Configuration errors live in :mod:`gelf_logging.config.validation`.
"""

from gelf_logging.kernel.errors.base import BaseError, GelfError
from gelf_logging.kernel.errors.contract import (
    ContractViolationError,
    InvalidFieldNameError,
    TemplateError,
    UnknownLogLevelError,
)

__all__ = [
    "BaseError",
    "ContractViolationError",
    "GelfError",
    "InvalidFieldNameError",
    "TemplateError",
    "UnknownLogLevelError",
]
