from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import MentorshipNoteType, MentorshipStatus


class MentorshipAssignmentCreateDto(BaseDto):
    mentor_id: str
    trainee_id: str
    programme_id: str
    status: MentorshipStatus = MentorshipStatus.ACTIVE


class MentorshipAssignmentPatchDto(BaseDto):
    status: MentorshipStatus | None = None


class MentorshipNoteCreateDto(BaseDto):
    assignment_id: str
    mentor_id: str
    trainee_id: str
    content: str
    type: MentorshipNoteType
