"""
Domain models for the fixture seeder.

Defines the user record inserted into the `users` collection. Optional fields
track presence rather than value: a field that was never passed is left out of
the stored document entirely, while an explicit ``None`` is stored as null.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field


class UserFixture(BaseModel):
    """
    Representation of a single document in the `users` collection.
    """

    id: ObjectId = Field(..., alias="_id", description="Document identifier, fresh per record.")
    email: str = Field(..., description="Email address; casing deliberately inconsistent.")
    first_name: Optional[str] = Field(None, description="Given name; may be absent.")
    last_name: Optional[str] = Field(None, description="Family name; may be absent.")
    status: str = Field(..., description="Free-text account status.")
    created_at: datetime = Field(..., description="Creation timestamp (UTC).")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp; may be absent.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
    }

    def has_field(self, name: str) -> bool:
        """Whether `name` (field name or alias) was supplied at construction."""
        if name == "_id":
            name = "id"
        return name in self.model_fields_set

    def to_document(self) -> Dict[str, Any]:
        """Insert-ready mapping; unset optional fields are omitted, not nulled."""
        return self.model_dump(by_alias=True, exclude_unset=True)


__all__ = ["UserFixture"]
