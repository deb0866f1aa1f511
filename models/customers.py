from pydantic import BaseModel, ConfigDict, Field

from models.base import MongoBaseModel

# Customers
# ------------


class CustomerDB(MongoBaseModel):
    name: str = Field(...)
    city: str | None = None


class CustomerRequest(BaseModel):
    name: str | None = None
    city: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Amiya", "city": "Rim Billiton"}}
    )


class CustomerResponse(BaseModel):
    id: int = Field(...)
    name: str = Field(...)
    city: str | None = None
