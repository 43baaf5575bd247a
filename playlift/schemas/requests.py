"""
Request validation schemas using Pydantic.

Provides type-safe validation for query and path parameters.
"""

import re
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator

# OAuth error codes are short snake_case words (RFC 6749 section 4.1.2.1)
_OAUTH_ERROR_RE = re.compile(r"^[a-z_]{1,64}$")


class CallbackParams(BaseModel):
    """Query parameters Spotify sends back to ``/callback``."""

    code: Optional[str] = None
    state: Optional[str] = None
    error: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator("code", "state")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty values as absent."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("error")
    @classmethod
    def normalize_error(cls, v: Optional[str]) -> Optional[str]:
        """Keep well-formed OAuth error codes, replace anything else."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        return v if _OAUTH_ERROR_RE.match(v) else "authorization_failed"


class PlaylistPath(BaseModel):
    """Path parameters for playlist endpoints."""

    playlist_id: Annotated[
        str,
        Field(
            min_length=1,
            max_length=64,
            pattern=r"^[A-Za-z0-9]+$",
            description="Spotify base-62 playlist ID",
        ),
    ]
