from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Wire schema and stored record.

    Frozen so that whatever the store hands out is a snapshot: callers
    cannot reach back into the mapping through it. Strict so that JSON
    like ``"year": "2016"`` or ``"was_good": 1`` fails to decode.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Client-chosen unique key")
    name: str = Field(..., description="Display title")
    year: int = Field(..., ge=0, le=65535, description="Release year (u16)")
    was_good: bool = Field(..., description="Client judgment flag")
