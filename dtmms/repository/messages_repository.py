from dtmms.common.constants import MESSAGE_ID_PREFIX, StorageCollection
from dtmms.dto.message_dto import MessageCreateDto
from dtmms.entity.message_entity import MessageEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class MessagesRepository(BaseCollectionRepository):
    """
    Repository for direct messages between users.

    Read state only moves from unread to read, through `mark_as_read`.
    """

    collection = StorageCollection.MESSAGES
    entity_class = MessageEntity

    def get_by_user_id(self, user_id: str) -> list[MessageEntity]:
        """Retrieve every message the user sent or received."""
        return self._find_all(
            lambda message: user_id in (message.sender_id, message.receiver_id)
        )

    def get_inbox(self, user_id: str) -> list[MessageEntity]:
        return self._find_all(lambda message: message.receiver_id == user_id)

    def get_sent(self, user_id: str) -> list[MessageEntity]:
        return self._find_all(lambda message: message.sender_id == user_id)

    def create(self, message: MessageCreateDto) -> MessageEntity:
        return self._insert(
            {
                **message.model_dump(exclude_none=True),
                "id": self._new_id(MESSAGE_ID_PREFIX),
                "is_read": False,
                "created_at": self._now(),
            }
        )

    def mark_as_read(self, message_id: str) -> bool:
        """
        Mark a message as read.

        Args:
            message_id (str): The message to update.

        Returns:
            bool: True if the message exists (including when it was already
                read), False otherwise.
        """
        records = self._load_records()
        for record in records:
            if record.get("id") == message_id:
                record["isRead"] = True
                self._save_records(records)
                return True
        return False
