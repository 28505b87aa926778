"""
Facade package - the per-core entry point.
"""
from .facade import Facade

__all__ = [
    'Facade'
]
