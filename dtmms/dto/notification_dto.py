from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import NotificationType


class NotificationCreateDto(BaseDto):
    user_id: str
    title: str
    message: str
    type: NotificationType
    link: str | None = None
