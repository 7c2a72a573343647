from sqlmodel import Session, col, select

from app.models.movie import Movie
from app.models.screening import Screening


def get_movie_by_id(*, session: Session, id: int) -> Movie | None:
    """
    Retrieve a movie by its ID.
    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to retrieve.
    Returns:
        Movie | None: The movie object if found, otherwise None.
    """
    movie = session.get(Movie, id)
    return movie


def get_movies(*, session: Session) -> list[Movie]:
    """
    Retrieve all movies, ordered by ID.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: All movies, empty if there are none.
    """
    stmt = select(Movie).order_by(col(Movie.id))
    movies: list[Movie] = list(session.exec(stmt).all())
    return movies


def create_movie(*, session: Session, movie: Movie) -> Movie:
    """
    Add a new movie to the database and flush so its ID is generated.

    Parameters:
        session (Session): The database session.
        movie (Movie): The movie to store.
    Returns:
        Movie: The stored movie, with its ID set.
    """
    session.add(movie)
    session.flush()
    return movie


def save_movie(*, session: Session, movie: Movie) -> Movie:
    """
    Flush the changes made to an existing movie.
    """
    session.add(movie)
    session.flush()
    return movie


def movie_exists(*, session: Session, id: int) -> bool:
    stmt = select(Movie.id).where(Movie.id == id)
    return session.exec(stmt).first() is not None


def movie_has_screenings(*, session: Session, id: int) -> bool:
    """
    Check whether any screening still references the movie.
    """
    stmt = select(Screening.id).where(Screening.movie_id == id).limit(1)
    return session.exec(stmt).first() is not None


def delete_movie_by_id(*, session: Session, id: int) -> None:
    """
    Delete a movie. Does nothing if it does not exist, callers check with
    movie_exists first.

    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to delete.
    Raises:
        IntegrityError: If screenings still reference the movie.
    """
    movie = session.get(Movie, id)
    if movie is not None:
        session.delete(movie)
        session.flush()
