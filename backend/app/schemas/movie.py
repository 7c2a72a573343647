from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "MovieBase",
    "MovieCreate",
    "MoviePublic",
]


# Shared properties, camelCase on the wire
class MovieBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    title: str = Field(min_length=1)
    director: str | None = None
    time: int | None = Field(default=None, ge=0, description="Runtime in minutes")
    trailer: str | None = None
    poster_image: str | None = None
    screenshot: str | None = None
    synopsis: str | None = None
    rating: float | None = Field(default=None, allow_inf_nan=False)


# Properties to receive on movie creation and full update
class MovieCreate(MovieBase):
    pass


# Properties to return to the client
class MoviePublic(MovieBase):
    id: int
