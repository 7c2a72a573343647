from sqlmodel import Session, col, select

from app.models.screening import Screening


def get_screening_by_id(*, session: Session, id: int) -> Screening | None:
    """
    Get a screening by its ID.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        id (int): The ID of the screening to retrieve.
    Returns:
        Screening | None: The Screening object if found, otherwise None.
    """
    return session.get(Screening, id)


def get_screenings(*, session: Session) -> list[Screening]:
    stmt = select(Screening).order_by(col(Screening.date), col(Screening.id))
    result = session.exec(stmt)
    return list(result.unique().all())


def create_screening(*, session: Session, screening: Screening) -> Screening:
    """
    Add a new screening and flush to generate its ID and check integrity.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        screening (Screening): The screening to store.
    Returns:
        Screening: The stored screening.
    Raises:
        IntegrityError: If the referenced movie does not exist.
    """
    session.add(screening)
    session.flush()
    return screening


def save_screening(*, session: Session, screening: Screening) -> Screening:
    session.add(screening)
    session.flush()
    return screening


def screening_exists(*, session: Session, id: int) -> bool:
    stmt = select(Screening.id).where(Screening.id == id)
    return session.exec(stmt).first() is not None


def delete_screening_by_id(*, session: Session, id: int) -> None:
    screening = session.get(Screening, id)
    if screening is not None:
        session.delete(screening)
        session.flush()
