"""
Pydantic schema for pet records.

A pet is identified by a 32‑bit unsigned integer.  Apart from ``id``
every field is optional when decoding: missing or ``null`` strings
become an empty string and ``extra`` defaults to ``null``, so decoding
stays purely structural.  ``id`` must be a JSON integer; strings,
booleans and floats are rejected.  Unknown keys in the payload are ignored.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

UINT32_MAX = 2**32 - 1


class Pet(BaseModel):
    """A single pet as stored and transferred over the API."""

    # Strict so that "1000", true or 7.0 are rejected rather than coerced.
    id: int = Field(..., strict=True, ge=0, le=UINT32_MAX, examples=[1000])
    name: str = Field("", examples=["Nemo"])
    # Early versions of this API swapped the JSON keys for species and
    # owner.  Both now map to the field of the same name.
    species: str = Field("", examples=["Goldfish"])
    owner: str = Field("", examples=["Marlin"])
    extra: Optional[Dict[str, Any]] = Field(
        None, description="Free‑form attributes, any JSON value per key"
    )

    @field_validator("name", "species", "owner", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        if v is None:
            return ""
        return v
