from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import FlushError

from library_app.errors import InfrastructureError, ValidationError


def commit(session, what: str = "record"):
    """
    Commits the caller's transaction. Constraint violations (duplicate key,
    dangling foreign key) come back as ValidationError, anything else the
    store raises as InfrastructureError. The session is rolled back either way.
    """
    try:
        session.commit()
    except (IntegrityError, FlushError) as e:
        # FlushError: the key is already held by an instance in this session
        session.rollback()
        detail = getattr(e, "orig", None) or e
        raise ValidationError(f"The {what} was rejected by the store: {detail}") from e
    except SQLAlchemyError as e:
        session.rollback()
        raise InfrastructureError(str(e)) from e
