import datetime as dt

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = [
    "ScreeningBase",
    "ScreeningCreate",
    "ScreeningPublic",
]


class ScreeningBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    movie_id: int
    room_id: int
    date: dt.date


# Properties to receive on screening creation and full update
class ScreeningCreate(ScreeningBase):
    pass


class ScreeningPublic(ScreeningBase):
    id: int
