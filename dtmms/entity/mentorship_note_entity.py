from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import MentorshipNoteType


class MentorshipNoteEntity(BaseEntity):
    assignment_id: str
    mentor_id: str
    trainee_id: str
    content: str
    type: MentorshipNoteType
    created_at: str
