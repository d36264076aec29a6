from dtmms.common.constants import REPLY_SUBJECT_TEMPLATE
from dtmms.dto.message_dto import MessageCreateDto
from dtmms.entity.message_entity import MessageEntity


class MessagingService:
    """Direct messaging between users and unread counters."""

    def __init__(self, logger, messages_repository, notifications_repository):
        """
        Args:
            logger: The logger instance for logging messages.
            messages_repository (MessagesRepository): Message storage.
            notifications_repository (NotificationsRepository): Notification
                storage, used for unread counts.
        """
        self.logger = logger
        self.messages_repository = messages_repository
        self.notifications_repository = notifications_repository

    def send_message(
        self, sender_id: str, receiver_id: str, subject: str, content: str
    ) -> MessageEntity:
        return self.messages_repository.create(
            MessageCreateDto(
                sender_id=sender_id,
                receiver_id=receiver_id,
                subject=subject,
                content=content,
            )
        )

    def reply_to_message(
        self, message_id: str, sender_id: str, content: str
    ) -> MessageEntity | None:
        """
        Reply to a message; the reply goes back to the original sender.

        Args:
            message_id (str): The message being answered.
            sender_id (str): The user writing the reply.
            content (str): The reply body.

        Returns:
            MessageEntity | None: The reply, or None if the original message
                does not exist.
        """
        original = self.messages_repository.get_by_id(message_id)
        if original is None:
            self.logger.warning(f"Cannot reply to missing message {message_id}.")
            return None

        return self.send_message(
            sender_id=sender_id,
            receiver_id=original.sender_id,
            subject=REPLY_SUBJECT_TEMPLATE.format(subject=original.subject),
            content=content,
        )

    def open_message(self, message_id: str, reader_id: str) -> MessageEntity | None:
        """
        Fetch a message for display, marking it read for its receiver.

        Opening one's own sent message leaves its read state untouched.

        Returns:
            MessageEntity | None: The message as stored after opening, or None.
        """
        message = self.messages_repository.get_by_id(message_id)
        if message is None:
            return None

        if message.receiver_id == reader_id and not message.is_read:
            self.messages_repository.mark_as_read(message_id)
            message.is_read = True
        return message

    def get_inbox(self, user_id: str) -> list[MessageEntity]:
        return self._newest_first(self.messages_repository.get_inbox(user_id))

    def get_sent(self, user_id: str) -> list[MessageEntity]:
        return self._newest_first(self.messages_repository.get_sent(user_id))

    def get_unread_message_count(self, user_id: str) -> int:
        return sum(
            1
            for message in self.messages_repository.get_inbox(user_id)
            if not message.is_read
        )

    def get_unread_notification_count(self, user_id: str) -> int:
        return sum(
            1
            for notification in self.notifications_repository.get_by_user_id(user_id)
            if not notification.is_read
        )

    @staticmethod
    def _newest_first(messages: list[MessageEntity]) -> list[MessageEntity]:
        return sorted(messages, key=lambda message: message.created_at, reverse=True)
