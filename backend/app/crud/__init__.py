from .movie import (
    create_movie,
    delete_movie_by_id,
    get_movie_by_id,
    get_movies,
    movie_exists,
    movie_has_screenings,
    save_movie,
)
from .screening import (
    create_screening,
    delete_screening_by_id,
    get_screening_by_id,
    get_screenings,
    save_screening,
    screening_exists,
)
