from pydantic import Field
from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import ProgrammeStatus


class ProgrammeEntity(BaseEntity):
    title: str
    category: str
    start_date: str
    end_date: str
    trainer_id: str
    max_participants: int = Field(ge=0)
    # Incremented by enrollment creation only; never recomputed.
    enrolled_count: int = 0
    status: ProgrammeStatus
    description: str | None = None
    created_at: str | None = None
