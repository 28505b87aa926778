"""
Proxy pattern package.
"""
from .proxy import Proxy

__all__ = [
    'Proxy'
]
