from dtmms.entity.base_entity import BaseEntity


class SessionEntity(BaseEntity):
    programme_id: str
    title: str
    date: str
    start_time: str
    end_time: str
    venue: str
    trainer_id: str
    description: str | None = None
