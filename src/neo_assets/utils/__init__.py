"""Shared utilities for neo-assets."""

from .uuid import generate_uuid_v7, is_valid_uuid
from .awaitables import resolve

__all__ = [
    "generate_uuid_v7",
    "is_valid_uuid",
    "resolve",
]
