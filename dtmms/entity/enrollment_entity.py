from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import EnrollmentStatus


class EnrollmentEntity(BaseEntity):
    trainee_id: str
    programme_id: str
    enrolled_at: str
    status: EnrollmentStatus
