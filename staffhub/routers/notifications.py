from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.models.user import User
from staffhub.routers.auth_deps import get_current_user
from staffhub.schemas.notification import NotificationResponse
from staffhub.services.notification import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/me", response_model=ApiResponse[List[NotificationResponse]])
def get_my_notifications(
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    notifications = NotificationService.list_for_user(db, current_user.id, unread_only=unread_only)
    return ApiResponse.listing([NotificationResponse.model_validate(n) for n in notifications])


@router.patch("/{notification_id}/read", response_model=ApiResponse[NotificationResponse])
def mark_notification_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    notification = NotificationService.mark_read(db, current_user.id, notification_id)
    return ApiResponse.ok(NotificationResponse.model_validate(notification))
