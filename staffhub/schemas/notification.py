from datetime import datetime
from typing import Optional

from staffhub.core.schemas import CamelModel


class NotificationResponse(CamelModel):
    id: int
    message: str
    is_read: bool
    created_at: Optional[datetime] = None
