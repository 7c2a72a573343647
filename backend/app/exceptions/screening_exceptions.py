from fastapi import status

from .base import AppError


class ScreeningNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, screening_id: int):
        self.screening_id = screening_id
        detail = f"Screening with ID {screening_id} not found."
        super().__init__(detail)
