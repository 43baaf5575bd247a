"""
Pydantic schemas for request validation.
"""

from pydantic import ValidationError

from .requests import (
    CallbackParams,
    PlaylistPath,
)

__all__ = [
    "ValidationError",
    "CallbackParams",
    "PlaylistPath",
]
