"""
Shared schema building blocks - sparse (partial) update bodies
"""
from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Base for update bodies. Only fields present in the request are applied:
    an omitted field keeps its stored value, an explicit null clears a nullable column.
    Columns listed in ``non_nullable`` reject an explicit null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self):
        for name in sorted(self.model_fields_set & self.non_nullable):
            if getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent by the caller, keyed by column name."""
        return self.model_dump(exclude_unset=True)
