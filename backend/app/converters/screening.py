from app.models.movie import Movie
from app.models.screening import Screening
from app.schemas.screening import ScreeningCreate, ScreeningPublic


def to_public(screening: Screening) -> ScreeningPublic:
    """
    Convert a Screening object to a ScreeningPublic schema.

    Parameters:
        screening (Screening): The Screening object to convert.
    Returns:
        ScreeningPublic: The converted schema, exposing the movie by its ID.
    """
    return ScreeningPublic(
        id=screening.id,
        movie_id=screening.movie_id,
        room_id=screening.room_id,
        date=screening.date,
    )


def to_model(screening_in: ScreeningCreate, movie: Movie) -> Screening:
    """
    Build a new Screening linked to an already resolved movie.

    Parameters:
        screening_in (ScreeningCreate): The incoming screening data.
        movie (Movie): The movie referenced by screening_in.movie_id.
    Returns:
        Screening: The new, not yet persisted, screening.
    """
    return Screening(
        movie=movie,
        movie_id=movie.id,
        room_id=screening_in.room_id,
        date=screening_in.date,
    )


def apply_update(
    screening: Screening,
    screening_in: ScreeningCreate,
    movie: Movie,
) -> Screening:
    screening.movie = movie
    screening.movie_id = movie.id
    screening.room_id = screening_in.room_id
    screening.date = screening_in.date
    return screening
