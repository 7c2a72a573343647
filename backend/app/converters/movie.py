from app.models.movie import Movie
from app.schemas.movie import MovieCreate, MoviePublic

# Fields copied between the wire shape and the table, everything but the ID
MOVIE_FIELDS = (
    "title",
    "director",
    "time",
    "trailer",
    "poster_image",
    "screenshot",
    "synopsis",
    "rating",
)


def to_public(movie: Movie) -> MoviePublic:
    """
    Convert a Movie object to a MoviePublic schema.

    Parameters:
        movie (Movie): The Movie object to convert.
    Returns:
        MoviePublic: The converted MoviePublic schema.
    Raises:
        ValidationError: If the movie has no ID yet or its stored data is invalid.
    """
    return MoviePublic(
        id=movie.id,
        **{field: getattr(movie, field) for field in MOVIE_FIELDS},
    )


def to_model(movie_in: MovieCreate) -> Movie:
    """
    Build a new, not yet persisted, Movie from the incoming data.
    """
    return Movie(**{field: getattr(movie_in, field) for field in MOVIE_FIELDS})


def apply_update(movie: Movie, movie_in: MovieCreate) -> Movie:
    """
    Overwrite every mutable field of the movie with the incoming data. Fields
    left out of the request hold their defaults and replace the stored value.
    """
    for field in MOVIE_FIELDS:
        setattr(movie, field, getattr(movie_in, field))
    return movie
