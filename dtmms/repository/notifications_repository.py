from dtmms.common.constants import NOTIFICATION_ID_PREFIX, StorageCollection
from dtmms.dto.notification_dto import NotificationCreateDto
from dtmms.entity.notification_entity import NotificationEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class NotificationsRepository(BaseCollectionRepository):
    collection = StorageCollection.NOTIFICATIONS
    entity_class = NotificationEntity

    def get_by_user_id(self, user_id: str) -> list[NotificationEntity]:
        return self._find_all(lambda notification: notification.user_id == user_id)

    def create(self, notification: NotificationCreateDto) -> NotificationEntity:
        return self._insert(
            {
                **notification.model_dump(exclude_none=True),
                "id": self._new_id(NOTIFICATION_ID_PREFIX),
                "is_read": False,
                "created_at": self._now(),
            }
        )

    def mark_as_read(self, notification_id: str) -> bool:
        """Mark a notification as read. Returns False if it does not exist."""
        records = self._load_records()
        for record in records:
            if record.get("id") == notification_id:
                record["isRead"] = True
                self._save_records(records)
                return True
        return False
