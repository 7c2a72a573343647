from .movie import Movie
from .screening import Screening

Screening.model_rebuild()  # Resolve the forward reference to Movie

__all__ = [
    "Movie",
    "Screening",
]
