from pydantic import BaseModel


class Category(BaseModel):
    id: int
    name: str
    description: str

    model_config = {"from_attributes": True}
