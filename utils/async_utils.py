"""
Helpers for callbacks that may be plain functions or coroutines.
"""
import inspect
from typing import Any


async def maybe_await(result: Any) -> Any:
    """Await result if it is awaitable, otherwise return it unchanged"""
    if inspect.isawaitable(result):
        return await result
    return result
