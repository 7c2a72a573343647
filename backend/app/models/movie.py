from sqlmodel import Field, SQLModel

__all__ = [
    "Movie",
]


# Database model
class Movie(SQLModel, table=True):
    __tablename__ = "peliculas"

    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    title: str
    director: str | None = None
    time: int | None = Field(default=None, description="Runtime in minutes")
    trailer: str | None = None
    poster_image: str | None = None
    screenshot: str | None = None
    synopsis: str | None = None
    rating: float | None = None
