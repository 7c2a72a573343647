from app.exceptions.base import InvalidIdError

# Largest value an INTEGER primary key can hold
MAX_ID = 2**31 - 1


def parse_id(value: str) -> int:
    """
    Parse an ID received as a path parameter.

    Parameters:
        value (str): The raw ID.
    Returns:
        int: The ID as a positive integer.
    Raises:
        InvalidIdError: If the value is not made of digits only, is zero,
            or does not fit in an INTEGER column.
    """
    if not value.isascii() or not value.isdigit():
        raise InvalidIdError(value)
    parsed = int(value)
    if parsed <= 0 or parsed > MAX_ID:
        raise InvalidIdError(value)
    return parsed
