"""
Multicore exceptions module.
All custom exceptions for core wiring and dispatch.
"""

from .multicore_exceptions import (
    MulticoreError,
    ConfigurationError,
    MultitonKeyError,
    NotifierNotInitializedError,
    MacroCommandError
)

__all__ = [
    "MulticoreError",
    "ConfigurationError",
    "MultitonKeyError",
    "NotifierNotInitializedError",
    "MacroCommandError"
]
