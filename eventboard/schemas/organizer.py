from pydantic import BaseModel, Field
from typing import Optional


class OrganizerData(BaseModel):
    name: str = Field(..., json_schema_extra={"example": "Acme Events"})
    logo: Optional[str] = Field(
        None, json_schema_extra={"example": "/static/logos/acme.png"}
    )
    website: Optional[str] = Field(
        None, json_schema_extra={"example": "https://acme.example"}
    )


class Organizer(OrganizerData):
    id: int

    model_config = {"from_attributes": True}
