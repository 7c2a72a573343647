from typing import Any

from fastapi import APIRouter, Response, status

from app.api.deps import SessionDep
from app.schemas.common import ErrorMessage, Message
from app.schemas.screening import ScreeningCreate, ScreeningPublic
from app.services import screenings as screenings_service

router = APIRouter(prefix="/sesiones", tags=["screenings"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage},
    status.HTTP_404_NOT_FOUND: {"model": ErrorMessage},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage},
}


@router.post(
    "/",
    response_model=ScreeningPublic,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_screening(
    *, session: SessionDep, screening_in: ScreeningCreate
) -> ScreeningPublic:
    return screenings_service.insert_screening(
        session=session, screening_in=screening_in
    )


@router.get(
    "/",
    response_model=list[ScreeningPublic],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No screenings registered"}},
)
def read_screenings(session: SessionDep) -> Any:
    screenings = screenings_service.get_all_screenings(session=session)
    if not screenings:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return screenings


@router.get("/{id}", response_model=ScreeningPublic, responses=ERROR_RESPONSES)
def read_screening(*, session: SessionDep, id: str) -> ScreeningPublic:
    return screenings_service.get_screening_by_id(session=session, screening_id=id)


@router.put("/{id}", response_model=ScreeningPublic, responses=ERROR_RESPONSES)
def update_screening(
    *, session: SessionDep, id: str, screening_in: ScreeningCreate
) -> ScreeningPublic:
    return screenings_service.modify_screening(
        session=session, screening_id=id, screening_in=screening_in
    )


@router.delete("/{id}", response_model=Message, responses=ERROR_RESPONSES)
def delete_screening(*, session: SessionDep, id: str) -> Message:
    screenings_service.delete_screening(session=session, screening_id=id)
    return Message(message=f"Screening with ID {id} deleted successfully")
