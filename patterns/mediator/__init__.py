"""
Mediator pattern package.
"""
from .mediator import Mediator

__all__ = [
    'Mediator'
]
