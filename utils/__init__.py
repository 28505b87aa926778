"""
Shared helpers: logging and awaitable handling.
"""
