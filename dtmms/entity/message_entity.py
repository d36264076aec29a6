from dtmms.entity.base_entity import BaseEntity


class MessageEntity(BaseEntity):
    sender_id: str
    receiver_id: str
    subject: str
    content: str
    is_read: bool = False
    created_at: str
