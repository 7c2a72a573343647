from typing import Any

from fastapi import APIRouter, Response, status

from app.api.deps import SessionDep
from app.schemas.common import ErrorMessage, Message
from app.schemas.movie import MovieCreate, MoviePublic
from app.services import movies as movies_service

router = APIRouter(prefix="/peliculas", tags=["movies"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage},
    status.HTTP_404_NOT_FOUND: {"model": ErrorMessage},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage},
}


@router.post(
    "/",
    response_model=MoviePublic,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_movie(*, session: SessionDep, movie_in: MovieCreate) -> MoviePublic:
    return movies_service.insert_movie(session=session, movie_in=movie_in)


@router.get(
    "/",
    response_model=list[MoviePublic],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No movies registered"}},
)
def read_movies(session: SessionDep) -> Any:
    movies = movies_service.get_all_movies(session=session)
    if not movies:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return movies


@router.get("/{id}", response_model=MoviePublic, responses=ERROR_RESPONSES)
def read_movie(*, session: SessionDep, id: str) -> MoviePublic:
    return movies_service.get_movie_by_id(session=session, movie_id=id)


@router.put("/{id}", response_model=MoviePublic, responses=ERROR_RESPONSES)
def update_movie(
    *, session: SessionDep, id: str, movie_in: MovieCreate
) -> MoviePublic:
    return movies_service.modify_movie(session=session, movie_id=id, movie_in=movie_in)


@router.delete(
    "/{id}",
    response_model=Message,
    responses={
        **ERROR_RESPONSES,
        status.HTTP_409_CONFLICT: {"model": ErrorMessage},
    },
)
def delete_movie(*, session: SessionDep, id: str) -> Message:
    movies_service.delete_movie(session=session, movie_id=id)
    return Message(message=f"Movie with ID {id} deleted successfully")
