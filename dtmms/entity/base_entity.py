from typing import Any
from dtmms.dto.base_dto import BaseDto


class BaseEntity(BaseDto):
    """
    Base class for persisted records.

    Attributes are snake_case in Python and camelCase in storage.
    """

    id: str

    def to_record(self) -> dict[str, Any]:
        """Serialize into the persisted camelCase shape, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
