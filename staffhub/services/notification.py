from typing import List

from sqlalchemy.orm import Session

from staffhub.core.exceptions import NotFoundError
from staffhub.models.notification import Notification


class NotificationService:
    @staticmethod
    def notify_user(db: Session, user_id: int, message: str) -> Notification:
        """
        Stage a notification for a user.
        The caller's commit persists it alongside the change that triggered it.
        """
        notification = Notification(user_id=user_id, message=message)
        db.add(notification)
        return notification

    @staticmethod
    def list_for_user(db: Session, user_id: int, unread_only: bool = False) -> List[Notification]:
        query = db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).limit(50).all()

    @staticmethod
    def mark_read(db: Session, user_id: int, notification_id: int) -> Notification:
        notification = db.query(Notification).filter(
            Notification.id == notification_id,
            Notification.user_id == user_id
        ).first()
        if not notification:
            raise NotFoundError("Notification not found")

        notification.is_read = True
        try:
            db.commit()
            db.refresh(notification)
        except Exception:
            db.rollback()
            raise
        return notification
