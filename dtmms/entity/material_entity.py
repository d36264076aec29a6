from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import MaterialType


class MaterialEntity(BaseEntity):
    programme_id: str
    title: str
    type: MaterialType
    url: str
    uploaded_by: str
    uploaded_at: str
    session_id: str | None = None
    description: str | None = None
