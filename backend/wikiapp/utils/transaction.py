from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from wikiapp.extensions import db
from wikiapp.domain.exceptions import StorageError

@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Transaction rolled back")
        raise StorageError(message=str(exc.__class__.__name__)) from exc
    except Exception:
        db.session.rollback()
        raise
