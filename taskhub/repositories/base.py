# taskhub/repositories/base.py
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskhub.errors import database_error

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def translate_errors(self, message: str):
        """Turns driver/ORM failures into database_error; raw engine text stays in the log"""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{message}: {e}")
            raise database_error(message, e)

    def commit(self, message: str) -> None:
        with self.translate_errors(message):
            self.db.commit()
