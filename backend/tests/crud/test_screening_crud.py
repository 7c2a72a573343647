import datetime as dt

from sqlmodel import Session

from app.crud import screening as screening_crud
from app.models.screening import Screening


def test_get_screening_by_id_loads_movie(
    *,
    db_transaction: Session,
    screening_factory,
):
    screening: Screening = screening_factory()

    retrieved = screening_crud.get_screening_by_id(
        session=db_transaction,
        id=screening.id,
    )

    assert retrieved is screening
    assert retrieved.movie.id == screening.movie_id


def test_get_screening_by_id_not_found(
    *,
    db_transaction: Session,
):
    assert screening_crud.get_screening_by_id(session=db_transaction, id=1) is None


def test_create_screening(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie = movie_factory()
    screening = Screening(
        movie=movie,
        movie_id=movie.id,
        room_id=3,
        date=dt.date(2024, 5, 1),
    )

    created = screening_crud.create_screening(
        session=db_transaction,
        screening=screening,
    )

    assert created.id is not None
    assert screening_crud.screening_exists(session=db_transaction, id=created.id)


def test_get_screenings_ordered_by_date(
    *,
    db_transaction: Session,
    screening_factory,
):
    third = screening_factory(date=dt.date(2024, 7, 1))
    first = screening_factory(date=dt.date(2024, 5, 1))
    second = screening_factory(date=dt.date(2024, 6, 1))

    retrieved = screening_crud.get_screenings(session=db_transaction)

    assert [screening.id for screening in retrieved] == [first.id, second.id, third.id]


def test_delete_screening_by_id(
    *,
    db_transaction: Session,
    screening_factory,
):
    screening_id = screening_factory().id

    screening_crud.delete_screening_by_id(session=db_transaction, id=screening_id)

    assert screening_crud.screening_exists(session=db_transaction, id=screening_id) is False
