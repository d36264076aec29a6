from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import AttendanceStatus


class AttendanceEntity(BaseEntity):
    session_id: str
    trainee_id: str
    status: AttendanceStatus
    marked_at: str
    marked_by: str
    notes: str | None = None
