from dtmms.dto.base_dto import BaseDto


class MessageCreateDto(BaseDto):
    sender_id: str
    receiver_id: str
    subject: str
    content: str
