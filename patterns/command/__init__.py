"""
Command pattern package - leaf and composite commands.
"""
from .simple_command import SimpleCommand
from .macro_command import MacroCommand

__all__ = [
    'SimpleCommand',
    'MacroCommand'
]
