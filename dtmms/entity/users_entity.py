from dtmms.entity.base_entity import BaseEntity
from dtmms.common.user_role import UserRole


class UsersEntity(BaseEntity):
    email: str
    # Stored and compared as plain text.
    password: str
    role: UserRole
    first_name: str
    last_name: str
    is_active: bool
    phone: str | None = None
    avatar: str | None = None
    created_at: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
