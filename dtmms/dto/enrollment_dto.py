from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import EnrollmentStatus


class EnrollmentCreateDto(BaseDto):
    trainee_id: str
    programme_id: str
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE


class EnrollmentPatchDto(BaseDto):
    status: EnrollmentStatus | None = None
