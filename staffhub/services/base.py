import logging
from sqlalchemy.orm import Session


class BaseService:
    """Holds the request-scoped session and a per-class logger."""

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def commit(self, *instances):
        """Commit the unit of work, refreshing instances; roll back on failure."""
        try:
            self.db.commit()
            for instance in instances:
                self.db.refresh(instance)
        except Exception:
            self.db.rollback()
            raise

