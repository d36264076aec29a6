from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import MentorshipStatus


class MentorshipAssignmentEntity(BaseEntity):
    mentor_id: str
    trainee_id: str
    programme_id: str
    assigned_at: str
    status: MentorshipStatus
