from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class InvalidIdError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, value: str):
        self.value = value
        detail = f"Invalid ID: '{value}'. IDs must be positive integers."
        super().__init__(detail)


class DatabaseError(AppError):
    """
    Wraps any failure coming from the persistence layer. The original
    exception is kept as __cause__ (raise ... from e).
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, details: str):
        detail = f"Database error. {details}"
        super().__init__(detail)
