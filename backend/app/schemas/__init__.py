from .common import ErrorMessage, Message
from .movie import MovieCreate, MoviePublic
from .screening import ScreeningCreate, ScreeningPublic

__all__ = [
    "ErrorMessage",
    "Message",
    "MovieCreate",
    "MoviePublic",
    "ScreeningCreate",
    "ScreeningPublic",
]
