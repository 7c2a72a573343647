from logging import getLogger

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.converters import screening as screening_converters
from app.crud import movie as movies_crud
from app.crud import screening as screenings_crud
from app.exceptions.base import DatabaseError
from app.exceptions.movie_exceptions import MovieNotFoundError
from app.exceptions.screening_exceptions import ScreeningNotFoundError
from app.inputs.ids import parse_id
from app.models.movie import Movie
from app.models.screening import Screening
from app.schemas.screening import ScreeningCreate, ScreeningPublic

logger = getLogger(__name__)


def _resolve_movie(*, session: Session, movie_id: int) -> Movie:
    try:
        movie = movies_crud.get_movie_by_id(session=session, id=movie_id)
    except Exception as e:
        logger.exception("Failed looking up movie %d for a screening", movie_id)
        raise DatabaseError("Could not look up the screening's movie.") from e

    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def _get_existing_screening(*, session: Session, id: int) -> Screening:
    try:
        screening = screenings_crud.get_screening_by_id(session=session, id=id)
    except Exception as e:
        logger.exception("Failed looking up screening %d", id)
        raise DatabaseError("Could not look up the screening.") from e

    if screening is None:
        raise ScreeningNotFoundError(id)
    return screening


def insert_screening(
    *,
    session: Session,
    screening_in: ScreeningCreate,
) -> ScreeningPublic:
    """
    Create a new screening for an existing movie.

    Parameters:
        session (Session): Database session.
        screening_in (ScreeningCreate): Screening data to insert.
    Returns:
        ScreeningPublic: The created screening, including its generated ID.
    Raises:
        MovieNotFoundError: If screening_in.movie_id does not refer to a movie.
        DatabaseError: For other database errors.

    The movie is looked up before writing. If it is deleted in between,
    PostgreSQL raises a psycopg ForeignKeyViolation, mapped to
    MovieNotFoundError; other drivers surface it as a DatabaseError.
    """
    movie = _resolve_movie(session=session, movie_id=screening_in.movie_id)

    try:
        screening = screenings_crud.create_screening(
            session=session,
            screening=screening_converters.to_model(screening_in, movie),
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise MovieNotFoundError(screening_in.movie_id) from e
        logger.exception("Failed creating screening")
        raise DatabaseError("Could not create the screening.") from e
    except Exception as e:
        session.rollback()
        logger.exception("Failed creating screening")
        raise DatabaseError("Could not create the screening.") from e

    return screening_converters.to_public(screening)


def get_screening_by_id(
    *,
    session: Session,
    screening_id: str,
) -> ScreeningPublic:
    """
    Get a screening by its ID.

    Raises:
        InvalidIdError: If screening_id is not a positive integer.
        ScreeningNotFoundError: If the screening does not exist.
        DatabaseError: If the lookup itself failed.
    """
    id = parse_id(screening_id)
    screening = _get_existing_screening(session=session, id=id)
    return screening_converters.to_public(screening)


def modify_screening(
    *,
    session: Session,
    screening_id: str,
    screening_in: ScreeningCreate,
) -> ScreeningPublic:
    """
    Replace every field of an existing screening. The movie it points to
    after the update must exist.

    Parameters:
        session (Session): Database session.
        screening_id (str): ID of the screening to modify.
        screening_in (ScreeningCreate): The new screening data.
    Returns:
        ScreeningPublic: The updated screening.
    Raises:
        InvalidIdError: If screening_id is not a positive integer.
        ScreeningNotFoundError: If the screening does not exist.
        MovieNotFoundError: If screening_in.movie_id does not refer to a movie.
        DatabaseError: For other database errors.

    As in insert_screening, only a psycopg ForeignKeyViolation raised by a
    concurrent movie deletion is mapped to MovieNotFoundError.
    """
    id = parse_id(screening_id)
    screening = _get_existing_screening(session=session, id=id)
    movie = _resolve_movie(session=session, movie_id=screening_in.movie_id)

    try:
        screenings_crud.save_screening(
            session=session,
            screening=screening_converters.apply_update(screening, screening_in, movie),
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise MovieNotFoundError(screening_in.movie_id) from e
        logger.exception("Failed updating screening %d", id)
        raise DatabaseError("Could not update the screening.") from e
    except Exception as e:
        session.rollback()
        logger.exception("Failed updating screening %d", id)
        raise DatabaseError("Could not update the screening.") from e

    return screening_converters.to_public(screening)


def delete_screening(
    *,
    session: Session,
    screening_id: str,
) -> None:
    """
    Delete a screening.

    Raises:
        InvalidIdError: If screening_id is not a positive integer.
        ScreeningNotFoundError: If the screening does not exist.
        DatabaseError: For other database errors.
    """
    id = parse_id(screening_id)
    try:
        exists = screenings_crud.screening_exists(session=session, id=id)
    except Exception as e:
        logger.exception("Failed checking screening %d before deletion", id)
        raise DatabaseError("Could not look up the screening.") from e

    if not exists:
        raise ScreeningNotFoundError(id)

    try:
        screenings_crud.delete_screening_by_id(session=session, id=id)
        session.commit()
    except Exception as e:
        session.rollback()
        logger.exception("Failed deleting screening %d", id)
        raise DatabaseError("Could not delete the screening.") from e


def get_all_screenings(*, session: Session) -> list[ScreeningPublic]:
    """
    Get every registered screening, ordered by date.

    Returns:
        list[ScreeningPublic]: All screenings, an empty list when there are none.
    Raises:
        DatabaseError: If the screenings could not be read.
    """
    try:
        screenings = screenings_crud.get_screenings(session=session)
    except Exception as e:
        logger.exception("Failed listing screenings")
        raise DatabaseError("Could not retrieve the list of screenings.") from e

    return [screening_converters.to_public(screening) for screening in screenings]
