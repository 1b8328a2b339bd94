"""
Custom object schema (name, bio, species). Shared by the list view and the create form.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CustomObjectProperties(BaseModel):
    """The three practicum properties; always present, empty string when unset."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    bio: str = ""
    species: str = ""

    @field_validator("name", "bio", "species", mode="before")
    @classmethod
    def coerce_text(cls, v: object) -> object:
        # HubSpot returns null for properties never set on a record
        if v is None:
            return ""
        if not isinstance(v, str):
            return str(v)
        return v


class CustomObjectRecord(BaseModel):
    """One HubSpot result as handed to the homepage template."""
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    properties: CustomObjectProperties = Field(default_factory=CustomObjectProperties)


class CustomObjectForm(BaseModel):
    """Raw submission from the update form. category is the legacy name for species."""
    name: str | None = None
    bio: str | None = None
    species: str | None = None
    category: str | None = None

    def to_properties(self) -> CustomObjectProperties:
        return CustomObjectProperties(
            name=self.name or "",
            bio=self.bio or "",
            species=self.species or self.category or "",
        )


class CustomObjectCreate(BaseModel):
    """Request body for POST /crm/v3/objects/<type>."""
    properties: CustomObjectProperties
