from pydantic import Field
from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import ProgrammeStatus


class ProgrammeCreateDto(BaseDto):
    title: str
    category: str
    start_date: str
    end_date: str
    trainer_id: str
    max_participants: int = Field(ge=0)
    status: ProgrammeStatus = ProgrammeStatus.UPCOMING
    description: str | None = None


class ProgrammePatchDto(BaseDto):
    title: str | None = None
    category: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    max_participants: int | None = Field(default=None, ge=0)
    status: ProgrammeStatus | None = None
    description: str | None = None
