from pydantic import BaseModel, ConfigDict, Field

from models.base import MongoBaseModel

# Departments
# ------------


class DepartmentDB(MongoBaseModel):
    name: str = Field(...)
    location: str | None = None


class DepartmentRequest(BaseModel):
    name: str | None = None
    location: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "IT", "location": "Tashkent"}}
    )


class DepartmentResponse(BaseModel):
    id: int = Field(...)
    name: str = Field(...)
    location: str | None = None
