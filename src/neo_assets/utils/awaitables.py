"""Helpers for capabilities that may be sync or async."""

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it unchanged.

    Host-supplied capabilities and observers are allowed to be plain
    functions or coroutine functions.
    """
    if inspect.isawaitable(value):
        return await value
    return value
