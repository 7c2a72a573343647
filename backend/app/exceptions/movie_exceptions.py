from fastapi import status

from .base import AppError


class MovieNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = f"Movie with ID {movie_id} not found."
        super().__init__(detail)


class MovieHasScreeningsError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = f"Movie with ID {movie_id} still has screenings and cannot be deleted."
        super().__init__(detail)
