from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import AttendanceStatus


class AttendanceCreateDto(BaseDto):
    session_id: str
    trainee_id: str
    status: AttendanceStatus
    marked_by: str
    notes: str | None = None


class AttendancePatchDto(BaseDto):
    status: AttendanceStatus | None = None
    marked_by: str | None = None
    notes: str | None = None
