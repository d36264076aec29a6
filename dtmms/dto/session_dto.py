from dtmms.dto.base_dto import BaseDto


class SessionCreateDto(BaseDto):
    programme_id: str
    title: str
    date: str
    start_time: str
    end_time: str
    venue: str
    trainer_id: str
    description: str | None = None


class SessionPatchDto(BaseDto):
    title: str | None = None
    date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    venue: str | None = None
    description: str | None = None
