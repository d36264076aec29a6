from dtmms.dto.base_dto import BaseDto
from dtmms.common.user_role import UserRole


class UserCreateDto(BaseDto):
    email: str
    password: str
    role: UserRole
    first_name: str
    last_name: str
    is_active: bool = True
    phone: str | None = None
    avatar: str | None = None


class UserPatchDto(BaseDto):
    email: str | None = None
    password: str | None = None
    role: UserRole | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool | None = None
    phone: str | None = None
    avatar: str | None = None
