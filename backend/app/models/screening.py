import datetime as dt
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .movie import Movie

__all__ = [
    "Screening",
]


class Screening(SQLModel, table=True):
    __tablename__ = "sesiones"

    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    movie_id: int = Field(foreign_key="peliculas.id", nullable=False, index=True)
    movie: "Movie" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    room_id: int
    date: dt.date
