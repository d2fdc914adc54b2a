"""Utility helpers for clinic-management."""

from .datetime import utc_now
from .uuid import generate_concurrency_stamp, generate_uuid_v7

__all__ = [
    "utc_now",
    "generate_uuid_v7",
    "generate_concurrency_stamp",
]
