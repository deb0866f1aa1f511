from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MongoBaseModel(BaseModel):
    """
    Base for stored entities.

    Ids are sequential integers handed out by the repository on first save.
    A ``None`` id means the entity has never been persisted; once set the id
    is frozen.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: int | None = Field(default=None, alias="_id", frozen=True)

    def is_new(self) -> bool:
        return self.id is None


def decimal_to_number(value: Decimal | None) -> int | float | None:
    """
    Render a Decimal as a JSON number (whole values as int).

    The float form is exact for values of at most 15 significant digits,
    which models.employees enforces for salaries.
    """
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)
