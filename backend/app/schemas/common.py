from pydantic import BaseModel

__all__ = [
    "Message",
    "ErrorMessage",
]


class Message(BaseModel):
    message: str


# Body of every error response
class ErrorMessage(BaseModel):
    message: str
    uri: str
