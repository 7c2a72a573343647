from logging import getLogger

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.converters import movie as movie_converters
from app.crud import movie as movies_crud
from app.exceptions.base import DatabaseError
from app.exceptions.movie_exceptions import (
    MovieHasScreeningsError,
    MovieNotFoundError,
)
from app.inputs.ids import parse_id
from app.schemas.movie import MovieCreate, MoviePublic

logger = getLogger(__name__)


def insert_movie(
    *,
    session: Session,
    movie_in: MovieCreate,
) -> MoviePublic:
    """
    Create a new movie.

    Parameters:
        session (Session): Database session.
        movie_in (MovieCreate): Movie data to insert.
    Returns:
        MoviePublic: The created movie, including its generated ID.
    Raises:
        DatabaseError: If the movie could not be stored.
    """
    try:
        movie = movies_crud.create_movie(
            session=session,
            movie=movie_converters.to_model(movie_in),
        )
        session.commit()
    except Exception as e:
        session.rollback()
        logger.exception("Failed creating movie '%s'", movie_in.title)
        raise DatabaseError("Could not create the movie.") from e

    return movie_converters.to_public(movie)


def get_movie_by_id(
    *,
    session: Session,
    movie_id: str,
) -> MoviePublic:
    """
    Get a movie by its ID.

    Parameters:
        session (Session): Database session.
        movie_id (str): ID of the movie to retrieve, as received in the path.
    Returns:
        MoviePublic: The movie.
    Raises:
        InvalidIdError: If movie_id is not a positive integer.
        MovieNotFoundError: If the movie with the given ID does not exist.
        DatabaseError: If the lookup itself failed.
    """
    id = parse_id(movie_id)
    try:
        movie = movies_crud.get_movie_by_id(session=session, id=id)
    except Exception as e:
        logger.exception("Failed looking up movie %d", id)
        raise DatabaseError("Could not look up the movie.") from e

    if movie is None:
        raise MovieNotFoundError(id)
    return movie_converters.to_public(movie)


def modify_movie(
    *,
    session: Session,
    movie_id: str,
    movie_in: MovieCreate,
) -> MoviePublic:
    """
    Replace every field of an existing movie with the incoming data.

    Parameters:
        session (Session): Database session.
        movie_id (str): ID of the movie to modify.
        movie_in (MovieCreate): The new movie data.
    Returns:
        MoviePublic: The updated movie.
    Raises:
        InvalidIdError: If movie_id is not a positive integer.
        MovieNotFoundError: If the movie does not exist.
        DatabaseError: If the update could not be stored.
    """
    id = parse_id(movie_id)
    try:
        movie = movies_crud.get_movie_by_id(session=session, id=id)
    except Exception as e:
        logger.exception("Failed looking up movie %d", id)
        raise DatabaseError("Could not look up the movie.") from e

    if movie is None:
        raise MovieNotFoundError(id)

    try:
        movies_crud.save_movie(
            session=session,
            movie=movie_converters.apply_update(movie, movie_in),
        )
        session.commit()
    except Exception as e:
        session.rollback()
        logger.exception("Failed updating movie %d", id)
        raise DatabaseError("Could not update the movie.") from e

    return movie_converters.to_public(movie)


def delete_movie(
    *,
    session: Session,
    movie_id: str,
) -> None:
    """
    Delete a movie. The movie must exist and no screening may reference it.

    Parameters:
        session (Session): Database session.
        movie_id (str): ID of the movie to delete.
    Raises:
        InvalidIdError: If movie_id is not a positive integer.
        MovieNotFoundError: If the movie does not exist.
        MovieHasScreeningsError: If screenings still reference the movie.
        DatabaseError: For other database errors.

    A screening added between the check and the delete is reported by
    PostgreSQL as a psycopg ForeignKeyViolation and mapped to
    MovieHasScreeningsError. Other drivers (SQLite in tests) surface it as
    a DatabaseError.
    """
    id = parse_id(movie_id)
    try:
        exists = movies_crud.movie_exists(session=session, id=id)
        in_use = exists and movies_crud.movie_has_screenings(session=session, id=id)
    except Exception as e:
        logger.exception("Failed checking movie %d before deletion", id)
        raise DatabaseError("Could not look up the movie.") from e

    if not exists:
        raise MovieNotFoundError(id)
    if in_use:
        raise MovieHasScreeningsError(id)

    try:
        movies_crud.delete_movie_by_id(session=session, id=id)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise MovieHasScreeningsError(id) from e
        logger.exception("Failed deleting movie %d", id)
        raise DatabaseError("Could not delete the movie.") from e
    except Exception as e:
        session.rollback()
        logger.exception("Failed deleting movie %d", id)
        raise DatabaseError("Could not delete the movie.") from e


def get_all_movies(*, session: Session) -> list[MoviePublic]:
    """
    Get every registered movie.

    Parameters:
        session (Session): Database session.
    Returns:
        list[MoviePublic]: All movies, an empty list when there are none.
    Raises:
        DatabaseError: If the movies could not be read.
    """
    try:
        movies = movies_crud.get_movies(session=session)
    except Exception as e:
        logger.exception("Failed listing movies")
        raise DatabaseError("Could not retrieve the list of movies.") from e

    return [movie_converters.to_public(movie) for movie in movies]
