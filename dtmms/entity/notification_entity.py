from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import NotificationType


class NotificationEntity(BaseEntity):
    user_id: str
    title: str
    message: str
    type: NotificationType
    is_read: bool = False
    created_at: str
    link: str | None = None
