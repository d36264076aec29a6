from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import MaterialType


class MaterialCreateDto(BaseDto):
    programme_id: str
    title: str
    type: MaterialType
    url: str
    uploaded_by: str
    session_id: str | None = None
    description: str | None = None


class MaterialPatchDto(BaseDto):
    title: str | None = None
    type: MaterialType | None = None
    url: str | None = None
    description: str | None = None
